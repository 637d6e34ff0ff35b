"""filesize - binary (1024-based) file size conversion and human-readable formatting."""

from src.filesize.size_unit import (
    MAX_INT64,
    MIN_INT64,
    InvalidQuantityError,
    SizeUnit,
    UnknownSizeUnitError,
    convert,
    readable_size,
    readable_size_parts,
)

__all__ = [
    "MAX_INT64",
    "MIN_INT64",
    "InvalidQuantityError",
    "SizeUnit",
    "UnknownSizeUnitError",
    "convert",
    "readable_size",
    "readable_size_parts",
]
