"""Cube mesh data and the GPU vertex-buffer layouts that describe it."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass
from typing import Iterable, Sequence

from yus.linalg import cols_array_2d


class VertexFormat(enum.Enum):
    """Per-attribute data formats used by the cube shaders."""

    FLOAT32X2 = "float32x2"
    FLOAT32X3 = "float32x3"
    FLOAT32X4 = "float32x4"

    @property
    def components(self) -> int:
        return int(self.value[-1])

    @property
    def size(self) -> int:
        """Size of one attribute value in bytes."""
        return 4 * self.components


class StepMode(enum.Enum):
    """Whether a buffer advances per vertex or per instance."""

    VERTEX = "vertex"
    INSTANCE = "instance"


@dataclass(frozen=True)
class VertexAttribute:
    shader_location: int
    format: VertexFormat
    offset: int


@dataclass(frozen=True)
class VertexBufferLayout:
    array_stride: int
    step_mode: StepMode
    attributes: tuple[VertexAttribute, ...]


def _attr_array(first_location: int, *formats: VertexFormat) -> tuple[VertexAttribute, ...]:
    """Tightly packed attributes at consecutive shader locations."""
    attributes = []
    offset = 0
    for location, fmt in enumerate(formats, start=first_location):
        attributes.append(VertexAttribute(location, fmt, offset))
        offset += fmt.size
    return tuple(attributes)


def _floats(values: Sequence[float], count: int, what: str) -> tuple[float, ...]:
    result = tuple(float(v) for v in values)
    if len(result) != count:
        raise ValueError(f"{what} needs {count} components, got {len(result)}")
    return result


_VERTEX_STRUCT = struct.Struct("<8f")


@dataclass(frozen=True)
class Vertex:
    """A mesh vertex: position, normal and texture coordinate."""

    position: tuple[float, float, float]
    normal: tuple[float, float, float]
    uv: tuple[float, float]

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", _floats(self.position, 3, "position"))
        object.__setattr__(self, "normal", _floats(self.normal, 3, "normal"))
        object.__setattr__(self, "uv", _floats(self.uv, 2, "uv"))

    def to_bytes(self) -> bytes:
        """Little-endian ``float32`` layout matching :func:`vertex_layout`."""
        return _VERTEX_STRUCT.pack(*self.position, *self.normal, *self.uv)


_VERTEX_ATTRIBUTES = _attr_array(
    0,
    VertexFormat.FLOAT32X3,  # position
    VertexFormat.FLOAT32X3,  # normal
    VertexFormat.FLOAT32X2,  # uv
)


def vertex_layout() -> VertexBufferLayout:
    """Buffer layout of :class:`Vertex` data (shader locations 0-2)."""
    return VertexBufferLayout(_VERTEX_STRUCT.size, StepMode.VERTEX, _VERTEX_ATTRIBUTES)


def vertex_bytes(vertices: Iterable[Vertex]) -> bytes:
    """Concatenated bytes of the given vertices."""
    return b"".join(vertex.to_bytes() for vertex in vertices)


def index_bytes(indices: Iterable[int]) -> bytes:
    """Little-endian ``uint16`` index data."""
    values = list(indices)
    for index in values:
        if not 0 <= index <= 0xFFFF:
            raise ValueError(f"index {index} does not fit in 16 bits")
    return struct.pack(f"<{len(values)}H", *values)


# Four vertices per face so every face carries its own normal and UVs.
VERTICES: tuple[Vertex, ...] = (
    # +X face
    Vertex((1, -1, -1), (1, 0, 0), (0, 0)),
    Vertex((1, 1, -1), (1, 0, 0), (0, 1)),
    Vertex((1, 1, 1), (1, 0, 0), (1, 1)),
    Vertex((1, -1, 1), (1, 0, 0), (1, 0)),
    # -X face
    Vertex((-1, -1, 1), (-1, 0, 0), (0, 0)),
    Vertex((-1, 1, 1), (-1, 0, 0), (0, 1)),
    Vertex((-1, 1, -1), (-1, 0, 0), (1, 1)),
    Vertex((-1, -1, -1), (-1, 0, 0), (1, 0)),
    # +Y face
    Vertex((-1, 1, -1), (0, 1, 0), (0, 0)),
    Vertex((-1, 1, 1), (0, 1, 0), (0, 1)),
    Vertex((1, 1, 1), (0, 1, 0), (1, 1)),
    Vertex((1, 1, -1), (0, 1, 0), (1, 0)),
    # -Y face
    Vertex((-1, -1, 1), (0, -1, 0), (0, 0)),
    Vertex((-1, -1, -1), (0, -1, 0), (0, 1)),
    Vertex((1, -1, -1), (0, -1, 0), (1, 1)),
    Vertex((1, -1, 1), (0, -1, 0), (1, 0)),
    # +Z face
    Vertex((-1, -1, 1), (0, 0, 1), (0, 0)),
    Vertex((1, -1, 1), (0, 0, 1), (1, 0)),
    Vertex((1, 1, 1), (0, 0, 1), (1, 1)),
    Vertex((-1, 1, 1), (0, 0, 1), (0, 1)),
    # -Z face
    Vertex((1, -1, -1), (0, 0, -1), (0, 0)),
    Vertex((-1, -1, -1), (0, 0, -1), (1, 0)),
    Vertex((-1, 1, -1), (0, 0, -1), (1, 1)),
    Vertex((1, 1, -1), (0, 0, -1), (0, 1)),
)

# Six faces, two triangles each.
INDICES: tuple[int, ...] = tuple(
    index
    for base in range(0, len(VERTICES), 4)
    for index in (base, base + 1, base + 2, base, base + 2, base + 3)
)


_INSTANCE_STRUCT = struct.Struct("<16f")

# The column-major model matrix occupies four locations (3-6).
_INSTANCE_ATTRIBUTES = _attr_array(
    3,
    VertexFormat.FLOAT32X4,
    VertexFormat.FLOAT32X4,
    VertexFormat.FLOAT32X4,
    VertexFormat.FLOAT32X4,
)


@dataclass(frozen=True)
class InstanceRaw:
    """Per-instance model matrix stored as four columns."""

    model: tuple[tuple[float, float, float, float], ...]

    def __post_init__(self) -> None:
        columns = tuple(_floats(column, 4, "model column") for column in self.model)
        if len(columns) != 4:
            raise ValueError(f"model needs 4 columns, got {len(columns)}")
        object.__setattr__(self, "model", columns)

    @classmethod
    def from_mat4(cls, matrix) -> "InstanceRaw":
        return cls(tuple(tuple(column) for column in cols_array_2d(matrix)))

    def to_bytes(self) -> bytes:
        return _INSTANCE_STRUCT.pack(*(value for column in self.model for value in column))


def instance_layout() -> VertexBufferLayout:
    """Buffer layout of :class:`InstanceRaw` data, stepped per instance."""
    return VertexBufferLayout(_INSTANCE_STRUCT.size, StepMode.INSTANCE, _INSTANCE_ATTRIBUTES)