"""ZPL command builders for graphic field labels."""

from __future__ import annotations

from enum import Enum

from ..models.graphic import GraphicField
from ..models.options import MAX_ORIGIN


class CommandCode(str, Enum):
    """ZPL II command prefixes used in a graphic label."""

    START_FORMAT = "^XA"     # Begin label format
    END_FORMAT = "^XZ"       # End label format and print
    FIELD_ORIGIN = "^FO"     # Position the next field
    GRAPHIC_FIELD = "^GFA"   # Graphic field, ASCII hex data
    FIELD_SEPARATOR = "^FS"  # End of field


def build_field_origin_command(x: int = 0, y: int = 0) -> str:
    """Build ^FO command positioning the next field.

    Args:
        x: Dots from the left label edge (0-32000)
        y: Dots from the top label edge (0-32000)

    Returns:
        Command text, e.g. "^FO10,20"
    """
    for name, value in (("x", x), ("y", y)):
        if not 0 <= value <= MAX_ORIGIN:
            raise ValueError(f"Field origin {name} out of range: {value} (must be 0-{MAX_ORIGIN})")
    return f"{CommandCode.FIELD_ORIGIN.value}{x},{y}"


def build_graphic_field_command(field: GraphicField) -> str:
    """Build ^GFA command carrying an encoded payload.

    Format:
        ^GFA,<total>,<total>,<row_bytes>, <data> ^FS
        - total: Packed byte count (binary and graphic field byte counts)
        - row_bytes: Bytes per row
        - data: Compressed or plain hex payload
    """
    return (
        f"{CommandCode.GRAPHIC_FIELD.value},{field.total_bytes},{field.total_bytes},"
        f"{field.row_bytes}, {field.data} {CommandCode.FIELD_SEPARATOR.value}"
    )


def build_label(field: GraphicField, x: int = 0, y: int = 0) -> str:
    """Wrap a graphic field into a complete ^XA ... ^XZ label.

    Args:
        field: Encoded graphic field
        x: Field origin in dots from the left edge
        y: Field origin in dots from the top edge

    Returns:
        Label text ready to send to the printer
    """
    return (
        f"{CommandCode.START_FORMAT.value} \n"
        f"{build_field_origin_command(x, y)} {build_graphic_field_command(field)} \n"
        f"{CommandCode.END_FORMAT.value}"
    )
