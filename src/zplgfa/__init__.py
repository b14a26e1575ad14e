"""ZPL Graphic Field encoder.

  Pure Python package for turning images into ZPL ^GFA label commands.
  """

from .encoding import (
    classify_row,
    decompress_hex,
    decompress_uncompressed_hex,
    encode_row_nibbles,
    generate_gray_bitmap,
    get_byte_dimension,
    get_compressed_hex,
    get_repeat_code,
    get_uncompressed_hex,
    pack_1bpp,
)
from .exceptions import (
    InvalidBitmapShape,
    InvalidPayload,
    InvalidRepeatCount,
    InvalidRowAlignment,
    ZplGfaError,
)
from .models import EncodeOptions, GraphicField, PackedBitmap
from .printer_code import encode_graphic_field, generate_printer_code
from .protocol import (
    CommandCode,
    build_field_origin_command,
    build_graphic_field_command,
    build_label,
)

__version__ = "0.1.0"

__all__ = [
    # Main API
    "generate_printer_code",
    "encode_graphic_field",
    # Exceptions
    "ZplGfaError",
    "InvalidBitmapShape",
    "InvalidRowAlignment",
    "InvalidRepeatCount",
    "InvalidPayload",
    # Models
    "EncodeOptions",
    "GraphicField",
    "PackedBitmap",
    # Encoding
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
    # Protocol
    "CommandCode",
    "build_field_origin_command",
    "build_graphic_field_command",
    "build_label",
]
