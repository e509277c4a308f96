"""Cube scene: bind-group layout, initial uniform data, pipeline description
and the per-frame camera update."""

from __future__ import annotations

import enum
import struct
import time
from dataclasses import dataclass, field
from typing import Iterable, Sequence

import numpy as np

from yus.camera import FOV_Y, Z_FAR, Z_NEAR, Camera, OrbitController
from yus.linalg import look_at_rh, matrix_bytes, perspective_rh_gl, translation
from yus.mesh import (
    INDICES,
    VERTICES,
    InstanceRaw,
    VertexBufferLayout,
    index_bytes,
    instance_layout,
    vertex_bytes,
    vertex_layout,
)


class ShaderStage(enum.Flag):
    VERTEX = 1
    FRAGMENT = 2
    COMPUTE = 4


class BindingKind(enum.Enum):
    UNIFORM_BUFFER = "uniform-buffer"
    READ_ONLY_STORAGE_BUFFER = "read-only-storage-buffer"
    FLOAT_TEXTURE_2D = "float-texture-2d"
    FILTERING_SAMPLER = "filtering-sampler"


@dataclass(frozen=True)
class BindGroupLayoutEntry:
    binding: int
    visibility: ShaderStage
    kind: BindingKind
    min_binding_size: int | None = None


def _ubo_entry(binding: int, visibility: ShaderStage, size: int) -> BindGroupLayoutEntry:
    return BindGroupLayoutEntry(binding, visibility, BindingKind.UNIFORM_BUFFER, size)


def uniform_bind_group_layout() -> tuple[BindGroupLayoutEntry, ...]:
    """Entries of the single bind group used by the cube shaders."""
    return (
        _ubo_entry(0, ShaderStage.VERTEX, 64),  # camera view-projection
        _ubo_entry(1, ShaderStage.VERTEX, 64),  # model matrix
        _ubo_entry(2, ShaderStage.FRAGMENT, 32),  # light direction + colour
        BindGroupLayoutEntry(3, ShaderStage.FRAGMENT, BindingKind.FLOAT_TEXTURE_2D),
        BindGroupLayoutEntry(4, ShaderStage.FRAGMENT, BindingKind.FILTERING_SAMPLER),
        BindGroupLayoutEntry(5, ShaderStage.FRAGMENT, BindingKind.READ_ONLY_STORAGE_BUFFER),
    )


MATERIAL_COLOURS: tuple[tuple[float, float, float, float], ...] = (
    (1.0, 0.0, 0.0, 1.0),  # red cube
    (0.0, 1.0, 0.0, 1.0),  # green cube
    (0.0, 0.0, 1.0, 1.0),  # blue cube
)

LIGHT_DIRECTION = (-0.8, -1.0, -1.0, 0.0)
LIGHT_COLOUR = (0.0, 1.0, 1.0, 0.0)

INITIAL_EYE = (3.0, 2.0, 4.0)


def material_bytes(colours: Iterable[Sequence[float]]) -> bytes:
    """Storage-buffer data with one RGBA ``float32`` base colour per material."""
    values: list[float] = []
    for colour in colours:
        rgba = [float(c) for c in colour]
        if len(rgba) != 4:
            raise ValueError(f"a material colour needs 4 components, got {len(rgba)}")
        values.extend(rgba)
    return struct.pack(f"<{len(values)}f", *values)


def _aspect(width: float, height: float) -> float:
    if width <= 0 or height <= 0:
        raise ValueError(f"surface size must be positive, got {width}x{height}")
    return float(width) / float(height)


def initial_ubos(width: float, height: float) -> tuple[bytes, bytes, bytes]:
    """Initial contents of the camera, model and light uniform buffers."""
    aspect = _aspect(width, height)
    proj = perspective_rh_gl(FOV_Y, aspect, Z_NEAR, Z_FAR)
    view = look_at_rh(INITIAL_EYE, (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    camera = matrix_bytes(proj @ view)
    model = matrix_bytes(np.identity(4))
    light = struct.pack("<8f", *LIGHT_DIRECTION, *LIGHT_COLOUR)
    return camera, model, light


@dataclass(frozen=True)
class PipelineSpec:
    """Description of the cube render pipeline and its render pass."""

    surface_format: str
    vertex_entry: str = "vs_main"
    fragment_entry: str = "fs_main"
    buffers: tuple[VertexBufferLayout, ...] = field(
        default_factory=lambda: (vertex_layout(), instance_layout())
    )
    topology: str = "triangle-list"
    index_format: str = "uint16"
    depth_format: str = "depth32float"
    depth_write_enabled: bool = True
    depth_compare: str = "less"
    clear_colour: tuple[float, float, float, float] = (1.0, 0.0, 0.0, 1.0)
    clear_depth: float = 1.0


def pipeline_spec(surface_format: str) -> PipelineSpec:
    return PipelineSpec(surface_format=surface_format)


class Scene:
    """All CPU-side state of the cube demo for a surface of a given size."""

    def __init__(self, width: int, height: int) -> None:
        _aspect(width, height)
        self.width = int(width)
        self.height = int(height)

        self.camera = Camera()
        self.controller = OrbitController(self.camera, self.width, self.height)
        self.start_time = time.monotonic() * 1000.0

        self.layout = uniform_bind_group_layout()
        self.camera_ubo, self.model_ubo, self.light_ubo = initial_ubos(self.width, self.height)
        self.material_data = material_bytes(MATERIAL_COLOURS)

        self.vertex_data = vertex_bytes(VERTICES)
        self.index_data = index_bytes(INDICES)
        self.num_indices = len(INDICES)

        self.instances = [InstanceRaw.from_mat4(translation(p)) for p in [(0.0, 0.0, 0.0)]]
        self.instance_data = b"".join(inst.to_bytes() for inst in self.instances)
        self.instance_count = len(self.instances)

    def resolution(self) -> tuple[float, float]:
        return (float(self.width), float(self.height))

    def frame(self) -> bytes:
        """Advance the camera to its orbit position and return the new camera UBO data."""
        w, h = self.resolution()
        self.camera_ubo = matrix_bytes(self.camera.view_proj(w / h))
        return self.camera_ubo