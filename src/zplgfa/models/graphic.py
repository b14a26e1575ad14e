"""Encoded graphic field model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GraphicField:
    """Everything the ^GFA command needs from the encoder."""

    data: str
    total_bytes: int
    row_bytes: int
    compressed: bool = True

    @property
    def compression_ratio(self) -> float:
        """Payload characters relative to the uncompressed hex length."""
        if self.total_bytes == 0:
            return 1.0
        return len(self.data) / (self.total_bytes * 2)
