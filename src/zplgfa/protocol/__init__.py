"""ZPL command formatting."""

from .commands import (
    CommandCode,
    build_field_origin_command,
    build_graphic_field_command,
    build_label,
)

__all__ = [
    "CommandCode",
    "build_field_origin_command",
    "build_graphic_field_command",
    "build_label",
]
