"""Encoding options for label generation."""

from __future__ import annotations

from dataclasses import dataclass

# ^FO accepts 0-32000 dots on both axes
MAX_ORIGIN = 32000


def _check_origin(name: str, value: int) -> None:
    if not 0 <= value <= MAX_ORIGIN:
        raise ValueError(f"{name} out of range: {value} (must be 0-{MAX_ORIGIN})")


@dataclass(frozen=True, slots=True)
class EncodeOptions:
    """How an image is turned into a ZPL label.

    Attributes:
        invert: Print light pixels instead of dark ones
        compress: Use the run-length payload instead of plain hex
        origin_x: Field origin in dots from the left label edge
        origin_y: Field origin in dots from the top label edge
    """

    invert: bool = False
    compress: bool = True
    origin_x: int = 0
    origin_y: int = 0

    def __post_init__(self) -> None:
        _check_origin("origin_x", self.origin_x)
        _check_origin("origin_y", self.origin_y)
