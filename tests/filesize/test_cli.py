"""Tests for the filesize command-line interface."""

import os
from unittest.mock import patch

from typer.testing import CliRunner

from src.filesize.cli import app
from src.filesize.size_unit import MAX_INT64, MIN_INT64

runner = CliRunner()


class TestConvertCommand:
    def test_convert(self):
        result = runner.invoke(app, ["convert", "3", "GB", "MB"])
        assert result.exit_code == 0
        assert result.output.strip() == "3072"

    def test_convert_truncates(self):
        result = runner.invoke(app, ["convert", "1536", "byte", "kb"])
        assert result.exit_code == 0
        assert result.output.strip() == "1"

    def test_convert_warns_on_saturation(self):
        result = runner.invoke(app, ["convert", str(MAX_INT64), "TB", "Byte"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == str(MAX_INT64)
        assert "saturated" in result.output

    def test_convert_negative_quantity(self):
        result = runner.invoke(app, ["convert", "-5", "KB", "Byte"])
        assert result.exit_code == 0
        assert result.output.strip() == "-5120"

    def test_convert_negative_truncates_toward_zero(self):
        result = runner.invoke(app, ["convert", "-1536", "Byte", "KB"])
        assert result.exit_code == 0
        assert result.output.strip() == "-1"

    def test_convert_warns_on_negative_saturation(self):
        result = runner.invoke(app, ["convert", str(MIN_INT64), "TB", "Byte"])
        assert result.exit_code == 0
        assert result.output.splitlines()[0] == str(MIN_INT64)
        assert "saturated" in result.output

    def test_convert_warns_when_max_quantity_saturates(self):
        result = runner.invoke(app, ["convert", str(MAX_INT64), "KB", "Byte"])
        assert result.exit_code == 0
        assert result.output.splitlines()[0] == str(MAX_INT64)
        assert "saturated" in result.output

    def test_convert_exact_result_does_not_warn(self):
        result = runner.invoke(app, ["convert", "-3", "GB", "MB"])
        assert result.exit_code == 0
        assert result.output.strip() == "-3072"
        assert "saturated" not in result.output

    def test_convert_same_unit_does_not_warn(self):
        result = runner.invoke(app, ["convert", str(MAX_INT64), "KB", "KB"])
        assert result.exit_code == 0
        assert "saturated" not in result.output

    def test_convert_unknown_unit(self):
        result = runner.invoke(app, ["convert", "3", "GB", "PB"])
        assert result.exit_code == 1
        assert "Unknown size unit" in result.output

    def test_convert_out_of_range(self):
        result = runner.invoke(app, ["convert", str(2**63), "TB", "GB"])
        assert result.exit_code == 1
        assert "Quantity must be" in result.output


class TestReadableCommand:
    def test_readable(self):
        result = runner.invoke(app, ["readable", "1536"])
        assert result.exit_code == 0
        assert result.output.strip() == "1.5KB"

    def test_readable_with_unit(self):
        result = runner.invoke(app, ["readable", "300", "--unit", "MB"])
        assert result.exit_code == 0
        assert result.output.strip() == "300.0MB"

    def test_readable_zero_prints_nothing(self):
        result = runner.invoke(app, ["readable", "0"])
        assert result.exit_code == 0
        assert result.output.strip() == ""

    def test_readable_default_unit_from_environment(self):
        with patch.dict(os.environ, {"FILESIZE_DEFAULT_UNIT": "KB"}):
            result = runner.invoke(app, ["readable", "2"])
        assert result.exit_code == 0
        assert result.output.strip() == "2.0KB"

    def test_readable_negative_prints_nothing(self):
        result = runner.invoke(app, ["readable", "-5", "--unit", "KB"])
        assert result.exit_code == 0
        assert result.output.strip() == ""

    def test_readable_unknown_unit(self):
        result = runner.invoke(app, ["readable", "5", "-u", "PB"])
        assert result.exit_code == 1
        assert "Unknown size unit" in result.output


class TestTableCommand:
    def test_table(self):
        result = runner.invoke(app, ["table", "1", "--unit", "GB"])
        assert result.exit_code == 0
        assert "1073741824" in result.output
        assert "1048576" in result.output
        assert "1.0GB" in result.output

    def test_table_negative_quantity(self):
        result = runner.invoke(app, ["table", "-1", "-u", "KB"])
        assert result.exit_code == 0
        assert "-1024" in result.output
        assert "Readable" not in result.output
