"""Binary (1024-based) file size units.

Converts integral quantities between Byte, KB, MB, GB and TB and renders byte
counts as short human-readable strings such as "3.1GB" or "300.0MB".

Quantities follow signed 64-bit semantics: scaling up to a finer unit saturates
at MAX_INT64 / MIN_INT64 instead of growing past the 64-bit range.

Example usage:

```
from src.filesize.size_unit import SizeUnit, readable_size

SizeUnit.GB.to_mb(3)  # 3072
SizeUnit.BYTE.to_kb(1536)  # 1
readable_size(1536)  # "1.5KB"
readable_size(300, SizeUnit.MB)  # "300.0MB"
```
"""

from enum import Enum

from src.utils.logging import get_logger

logger = get_logger(__name__)

MAX_INT64 = 2**63 - 1
MIN_INT64 = -(2**63)

_LABELS = {
    1: "Byte",
    1024: "KB",
    1024**2: "MB",
    1024**3: "GB",
    1024**4: "TB",
}


class InvalidQuantityError(ValueError):
    """Raised when a quantity is not a signed 64-bit integer."""

    def __init__(self, quantity: object):
        self.quantity = quantity
        super().__init__(f"Quantity must be an integer in [{MIN_INT64}, {MAX_INT64}], got {quantity!r}")


class UnknownSizeUnitError(ValueError):
    """Raised when a unit label does not name a known size unit."""

    def __init__(self, label: str):
        self.label = label
        super().__init__(f"Unknown size unit: {label!r}")


class SizeUnit(Enum):
    """File size unit, valued by its multiplier in bytes."""

    BYTE = 1
    KB = 1024
    MB = 1024**2
    GB = 1024**3
    TB = 1024**4

    @property
    def multiplier(self) -> int:
        return self.value

    @property
    def label(self) -> str:
        return _LABELS[self.value]

    @classmethod
    def from_label(cls, label: str) -> "SizeUnit":
        """Look up a unit by its label, case-insensitively ("B" is accepted for Byte).

        Raises:
            UnknownSizeUnitError: If the label names no unit
        """
        key = label.strip().lower()
        if key == "b":
            return cls.BYTE
        for unit in cls:
            if unit.label.lower() == key:
                return unit
        raise UnknownSizeUnitError(label)

    def convert(self, quantity: int, to_unit: "SizeUnit") -> int:
        return convert(quantity, self, to_unit)

    def to_byte(self, quantity: int) -> int:
        return convert(quantity, self, SizeUnit.BYTE)

    def to_kb(self, quantity: int) -> int:
        return convert(quantity, self, SizeUnit.KB)

    def to_mb(self, quantity: int) -> int:
        return convert(quantity, self, SizeUnit.MB)

    def to_gb(self, quantity: int) -> int:
        return convert(quantity, self, SizeUnit.GB)

    def to_tb(self, quantity: int) -> int:
        return convert(quantity, self, SizeUnit.TB)

    def __str__(self) -> str:
        return self.label


def _check_quantity(quantity: object) -> int:
    # bool is an int subclass but never a size
    if not isinstance(quantity, int) or isinstance(quantity, bool):
        raise InvalidQuantityError(quantity)
    if quantity < MIN_INT64 or quantity > MAX_INT64:
        raise InvalidQuantityError(quantity)
    return quantity


def _scale_down(quantity: int, ratio: int) -> int:
    """Divide by ratio, truncating toward zero."""
    if quantity < 0:
        return -(-quantity // ratio)
    return quantity // ratio


def convert(quantity: int, from_unit: SizeUnit, to_unit: SizeUnit) -> int:
    """Convert a quantity expressed in from_unit into to_unit.

    Converting to a finer unit is exact unless the result leaves the signed 64-bit
    range, in which case MAX_INT64 or MIN_INT64 is returned. Converting to a coarser
    unit truncates toward zero.

    Args:
        quantity: Amount of from_unit, a signed 64-bit integer
        from_unit: Unit the quantity is expressed in
        to_unit: Unit to convert into

    Returns:
        The quantity expressed in to_unit

    Raises:
        InvalidQuantityError: If quantity is not a signed 64-bit integer
    """
    quantity = _check_quantity(quantity)
    if from_unit is to_unit:
        return quantity

    if from_unit.multiplier < to_unit.multiplier:
        return _scale_down(quantity, to_unit.multiplier // from_unit.multiplier)

    ratio = from_unit.multiplier // to_unit.multiplier
    limit = MAX_INT64 // ratio
    if -limit <= quantity <= limit:
        return quantity * ratio

    result = MAX_INT64 if quantity > 0 else MIN_INT64
    logger.debug(
        "Size conversion saturated",
        quantity=quantity,
        from_unit=from_unit.label,
        to_unit=to_unit.label,
        result=result,
    )
    return result


def _format_tenths(byte_size: int, multiplier: int) -> str:
    # round half up on the exact quotient, using integers only
    tenths = (byte_size * 20 + multiplier) // (multiplier * 2)
    return f"{tenths // 10}.{tenths % 10}"


def readable_size_parts(size_in_bytes: int) -> tuple[str, str]:
    """Split a byte count into a one-decimal magnitude and a unit label.

    The unit is the largest one that keeps the magnitude below 1024, so exactly
    1024 bytes is ("1.0", "KB") rather than ("1024.0", "Byte").

    Args:
        size_in_bytes: Size in bytes

    Returns:
        Tuple of (magnitude, label), e.g. ("1.5", "KB"); ("0", "Byte") for sizes <= 0
    """
    size_in_bytes = _check_quantity(size_in_bytes)
    if size_in_bytes <= 0:
        return "0", SizeUnit.BYTE.label

    unit = SizeUnit.BYTE
    for candidate in (SizeUnit.KB, SizeUnit.MB, SizeUnit.GB, SizeUnit.TB):
        if size_in_bytes < candidate.multiplier:
            break
        unit = candidate
    return _format_tenths(size_in_bytes, unit.multiplier), unit.label


def readable_size(size: int, unit: SizeUnit | None = SizeUnit.BYTE) -> str:
    """Format a size as a human-readable string such as "3.1GB" or "300.0MB".

    Args:
        size: Size expressed in unit
        unit: Unit of size, Byte by default

    Returns:
        Magnitude and unit label with no separator, or "" when size <= 0 or unit is None
    """
    size = _check_quantity(size)
    if size <= 0 or unit is None:
        return ""

    magnitude, label = readable_size_parts(convert(size, unit, SizeUnit.BYTE))
    return magnitude + label
