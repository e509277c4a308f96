"""Uniform block with time, centre and zoom, padded to the GPU layout."""

from __future__ import annotations

import struct
from dataclasses import dataclass

# time, pad, center.x, center.y, zoom, pad
_UNIFORMS_STRUCT = struct.Struct("<6f")


@dataclass
class Uniforms:
    """Shader uniforms; serialises to a 24-byte block."""

    time: float = 0.0
    center: tuple[float, float] = (-0.0, -1.0)
    zoom: float = 1.0

    def to_bytes(self) -> bytes:
        cx, cy = self.center
        return _UNIFORMS_STRUCT.pack(self.time, 0.0, cx, cy, self.zoom, 0.0)