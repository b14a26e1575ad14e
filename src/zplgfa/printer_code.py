"""Turn images into ZPL graphic labels."""

from __future__ import annotations

import logging

from PIL import Image

from .encoding import (
    generate_gray_bitmap,
    get_compressed_hex,
    get_uncompressed_hex,
    pack_1bpp,
)
from .models.graphic import GraphicField
from .models.options import EncodeOptions
from .protocol import build_label

_LOGGER = logging.getLogger(__name__)


def encode_graphic_field(
        image: Image.Image,
        invert: bool = False,
        compress: bool = True,
) -> GraphicField:
    """Encode an image into a ^GFA payload.

    Handles:
    - Grayscale conversion and padding to multiples of 8
    - Thresholding and 1-bit packing
    - Run-length compression (optional)

    Args:
        image: PIL Image in any mode
        invert: Print light pixels instead of dark ones (default: False)
        compress: Use run-length compression (default: True)

    Returns:
        GraphicField with payload and byte counts

    Raises:
        InvalidBitmapShape: If the prepared raster cannot be packed
    """
    gray = generate_gray_bitmap(image)
    bitmap = pack_1bpp(gray, invert=invert)

    if compress:
        data = get_compressed_hex(bitmap.data, bitmap.row_bytes)
    else:
        data = get_uncompressed_hex(bitmap.data)

    field = GraphicField(
        data=data,
        total_bytes=bitmap.total_bytes,
        row_bytes=bitmap.row_bytes,
        compressed=compress,
    )

    _LOGGER.debug(
        "Encoded %dx%d image: %d bytes -> %d characters (%.1f%%)",
        bitmap.width,
        bitmap.height,
        field.total_bytes,
        len(field.data),
        field.compression_ratio * 100,
    )

    return field


def generate_printer_code(
        image: Image.Image,
        options: EncodeOptions | None = None,
) -> str:
    """Build a complete ZPL label printing the image.

    Args:
        image: PIL Image in any mode
        options: Encoding options (default: EncodeOptions())

    Returns:
        Label text (^XA ... ^XZ)
    """
    if options is None:
        options = EncodeOptions()

    field = encode_graphic_field(image, invert=options.invert, compress=options.compress)

    _LOGGER.info(
        "Generated label for %dx%d image at (%d, %d), %s payload of %d characters",
        image.width,
        image.height,
        options.origin_x,
        options.origin_y,
        "compressed" if field.compressed else "uncompressed",
        len(field.data),
    )

    return build_label(field, options.origin_x, options.origin_y)
