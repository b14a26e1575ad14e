"""Test data models."""

import pytest

from zplgfa.exceptions import InvalidRowAlignment
from zplgfa.models import EncodeOptions, GraphicField, PackedBitmap


class TestPackedBitmap:
    """Test packed bitmap validation and row access."""

    def test_dimensions(self):
        bitmap = PackedBitmap(data=bytes(24), row_bytes=3)

        assert bitmap.row_count == 8
        assert bitmap.height == 8
        assert bitmap.width == 24
        assert bitmap.total_bytes == 24

    def test_rows_in_order(self):
        bitmap = PackedBitmap(data=b"\x01\x02\x03\x04\x05\x06", row_bytes=2)

        rows = [bytes(row) for row in bitmap.rows()]

        assert rows == [b"\x01\x02", b"\x03\x04", b"\x05\x06"]

    def test_row_by_index(self):
        bitmap = PackedBitmap(data=b"\x01\x02\x03\x04", row_bytes=2)

        assert bytes(bitmap.row(1)) == b"\x03\x04"
        with pytest.raises(IndexError):
            bitmap.row(2)

    def test_misaligned_length_raises(self):
        with pytest.raises(InvalidRowAlignment, match="not a multiple of row width 4"):
            PackedBitmap(data=bytes(10), row_bytes=4)

    @pytest.mark.parametrize("row_bytes", [0, -1])
    def test_invalid_row_width_raises(self, row_bytes):
        with pytest.raises(InvalidRowAlignment, match="at least 1"):
            PackedBitmap(data=b"", row_bytes=row_bytes)

    def test_immutable(self):
        bitmap = PackedBitmap(data=b"\x00", row_bytes=1)

        with pytest.raises(AttributeError):
            bitmap.row_bytes = 2  # type: ignore[misc]


class TestGraphicField:
    """Test graphic field model."""

    def test_compression_ratio(self):
        field = GraphicField(data="JF01", total_bytes=4, row_bytes=4)

        assert field.compression_ratio == 0.5

    def test_compression_ratio_empty(self):
        assert GraphicField(data="", total_bytes=0, row_bytes=1).compression_ratio == 1.0


class TestEncodeOptions:
    """Test encode option validation."""

    def test_defaults(self):
        options = EncodeOptions()

        assert options.invert is False
        assert options.compress is True
        assert (options.origin_x, options.origin_y) == (0, 0)

    @pytest.mark.parametrize(
        ("kwargs", "match"),
        [
            ({"origin_x": -1}, "origin_x out of range"),
            ({"origin_y": 32001}, "origin_y out of range"),
        ],
    )
    def test_origin_out_of_range(self, kwargs, match):
        with pytest.raises(ValueError, match=match):
            EncodeOptions(**kwargs)

    def test_origin_limits_accepted(self):
        options = EncodeOptions(origin_x=32000, origin_y=0)

        assert options.origin_x == 32000
