"""Exceptions raised by the ZPL graphic field encoder."""

from __future__ import annotations


class ZplGfaError(ValueError):
    """Base class for all encoder and decoder errors."""


class InvalidBitmapShape(ZplGfaError):
    """Raster cannot be packed: bad width, height or pixel depth."""

    def __init__(self, constraint: str, message: str):
        super().__init__(message)
        self.constraint = constraint


class InvalidRowAlignment(ZplGfaError):
    """Packed buffer length is not a multiple of the row byte width."""


class InvalidRepeatCount(ZplGfaError):
    """Run length cannot be expressed with the repeat count alphabets."""


class InvalidPayload(ZplGfaError):
    """Compressed or hex payload is malformed."""
