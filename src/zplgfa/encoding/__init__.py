"""Image packing and payload compression."""

from .compression import (
    classify_row,
    decompress_hex,
    decompress_uncompressed_hex,
    encode_row_nibbles,
    get_compressed_hex,
    get_repeat_code,
    get_uncompressed_hex,
)
from .images import generate_gray_bitmap, get_byte_dimension, pack_1bpp

__all__ = [
    "generate_gray_bitmap",
    "get_byte_dimension",
    "pack_1bpp",
    "classify_row",
    "encode_row_nibbles",
    "get_repeat_code",
    "get_compressed_hex",
    "get_uncompressed_hex",
    "decompress_hex",
    "decompress_uncompressed_hex",
]
