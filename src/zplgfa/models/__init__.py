"""Data models for ZPL graphic encoding."""

from .bitmap import PackedBitmap
from .graphic import GraphicField
from .options import MAX_ORIGIN, EncodeOptions

__all__ = [
    "EncodeOptions",
    "GraphicField",
    "MAX_ORIGIN",
    "PackedBitmap",
]
