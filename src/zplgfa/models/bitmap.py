"""Packed 1-bit-per-pixel bitmap model."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from ..exceptions import InvalidRowAlignment


@dataclass(frozen=True, slots=True)
class PackedBitmap:
    """Row-major 1bpp raster, 8 pixels per byte, MSB first.

    A set bit (1) is a printed dot.
    """

    data: bytes
    row_bytes: int

    def __post_init__(self) -> None:
        if self.row_bytes < 1:
            raise InvalidRowAlignment(
                f"row_bytes must be at least 1, got {self.row_bytes}"
            )
        if len(self.data) % self.row_bytes != 0:
            raise InvalidRowAlignment(
                f"Packed length {len(self.data)} is not a multiple of "
                f"row width {self.row_bytes} bytes"
            )

    @property
    def row_count(self) -> int:
        """Number of rows (pixel height)."""
        return len(self.data) // self.row_bytes

    @property
    def width(self) -> int:
        """Width in pixels."""
        return self.row_bytes * 8

    @property
    def height(self) -> int:
        return self.row_count

    @property
    def total_bytes(self) -> int:
        return len(self.data)

    def row(self, index: int) -> memoryview:
        """Get a zero-copy view of one row."""
        if not 0 <= index < self.row_count:
            raise IndexError(f"Row {index} out of range (0-{self.row_count - 1})")
        start = index * self.row_bytes
        return memoryview(self.data)[start:start + self.row_bytes]

    def rows(self) -> Iterator[memoryview]:
        """Iterate rows top to bottom."""
        view = memoryview(self.data)
        for start in range(0, len(self.data), self.row_bytes):
            yield view[start:start + self.row_bytes]
