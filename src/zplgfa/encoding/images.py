"""Image preprocessing and 1-bit packing for ZPL graphic fields."""

from __future__ import annotations

import logging

import numpy as np
from PIL import Image

from ..exceptions import InvalidBitmapShape
from ..models.bitmap import PackedBitmap

_LOGGER = logging.getLogger(__name__)

# Pixels above this value are light (not printed unless inverted)
THRESHOLD = 127

# Fill color for padding and transparent areas (white, unprinted on labels)
_PAD_COLOR = 255


def get_byte_dimension(dimension: int) -> int:
    """Round a pixel dimension up to the next multiple of 8."""
    remainder = dimension % 8
    if remainder == 0:
        return dimension
    return dimension + (8 - remainder)


def generate_gray_bitmap(image: Image.Image) -> Image.Image:
    """Draw an image onto an 8-bit grayscale canvas with byte-aligned size.

    The canvas width and height are rounded up to multiples of 8. The source
    is placed at the top-left corner; padding and transparent areas are white.

    Args:
        image: Any PIL Image

    Returns:
        Mode 'L' image whose dimensions are multiples of 8
    """
    width, height = image.size
    target_size = (get_byte_dimension(width), get_byte_dimension(height))

    if "A" in image.getbands() or "transparency" in image.info:
        # Flatten alpha onto white before dropping color
        rgba = image.convert("RGBA")
        background = Image.new("RGBA", rgba.size, (_PAD_COLOR,) * 4)
        gray = Image.alpha_composite(background, rgba).convert("L")
    else:
        gray = image.convert("L")

    if gray.size == target_size:
        return gray

    _LOGGER.debug("Padding image from %s to %s", image.size, target_size)
    canvas = Image.new("L", target_size, _PAD_COLOR)
    canvas.paste(gray, (0, 0))
    return canvas


def _pixel_array(raster: Image.Image | np.ndarray) -> np.ndarray:
    """Validate raster shape and return it as a 2-D uint8 array.

    Raises:
        InvalidBitmapShape: If width, height or pixel depth is unsupported
    """
    if isinstance(raster, Image.Image):
        width, height = raster.size
        single_byte = raster.mode == "L"
        mode = raster.mode
    else:
        if raster.ndim < 2:
            raise InvalidBitmapShape(
                "depth", f"Expected a 2-D pixel array, got {raster.ndim} dimension(s)"
            )
        height, width = raster.shape[:2]
        single_byte = raster.ndim == 2 and raster.dtype == np.uint8
        mode = f"{raster.dtype} {raster.shape}"

    if width % 8 != 0:
        raise InvalidBitmapShape("width", f"Width must be a multiple of 8, got {width}")
    if height % 8 != 0:
        raise InvalidBitmapShape("height", f"Height must be a multiple of 8, got {height}")
    if not single_byte:
        raise InvalidBitmapShape(
            "depth", f"Pixels must be 1 byte each (mode 'L'), got {mode}"
        )

    return np.asarray(raster, dtype=np.uint8)


def pack_1bpp(raster: Image.Image | np.ndarray, invert: bool = False) -> PackedBitmap:
    """Pack an 8-bit grayscale raster into 1 bit per pixel.

    Format: 8 pixels per byte, MSB first, rows top to bottom.
    Dark pixels (<= 127) become 1 bits; invert=True prints light pixels
    instead.

    Args:
        raster: Mode 'L' PIL Image or 2-D uint8 numpy array
        invert: Flip which pixels are set

    Returns:
        Packed bitmap with row_bytes = width / 8

    Raises:
        InvalidBitmapShape: If width or height is not a multiple of 8, or
            pixels are not one byte each
    """
    pixels = _pixel_array(raster)
    height, width = pixels.shape

    bits = (pixels > THRESHOLD) == invert
    # packbits pads a trailing partial byte with zero bits on the low end
    data = np.packbits(bits, axis=None).tobytes()

    _LOGGER.debug(
        "Packed %dx%d raster into %d bytes (invert=%s)", width, height, len(data), invert
    )

    return PackedBitmap(data=data, row_bytes=width // 8)
