import struct

import numpy as np
import pytest

from yus.linalg import matrix_bytes
from yus.mesh import INDICES, VERTICES, instance_layout, vertex_layout
from yus.scene import (
    BindingKind,
    Scene,
    ShaderStage,
    initial_ubos,
    material_bytes,
    pipeline_spec,
    uniform_bind_group_layout,
)


def test_bind_group_layout_entries():
    entries = uniform_bind_group_layout()
    assert [e.binding for e in entries] == list(range(6))
    assert [e.visibility for e in entries[:2]] == [ShaderStage.VERTEX, ShaderStage.VERTEX]
    assert all(e.visibility is ShaderStage.FRAGMENT for e in entries[2:])
    assert [e.min_binding_size for e in entries] == [64, 64, 32, None, None, None]
    assert entries[5].kind is BindingKind.READ_ONLY_STORAGE_BUFFER


def test_material_bytes_round_trip():
    colours = [(0.5, 0.25, 0.0, 1.0), (1.0, 1.0, 1.0, 0.5)]
    data = material_bytes(colours)
    values = struct.unpack("<8f", data)
    assert values == colours[0] + colours[1]


def test_material_bytes_rejects_short_colour():
    with pytest.raises(ValueError):
        material_bytes([(1.0, 0.0, 0.0)])


def test_initial_ubos():
    camera, model, light = initial_ubos(800, 600)
    assert len(camera) == 64
    assert model == matrix_bytes(np.identity(4))
    assert struct.unpack("<8f", light) == pytest.approx(
        (-0.8, -1.0, -1.0, 0.0, 0.0, 1.0, 1.0, 0.0)
    )


@pytest.mark.parametrize("size", [(800, 0), (0, 600), (-1, 10)])
def test_initial_ubos_rejects_bad_size(size):
    with pytest.raises(ValueError):
        initial_ubos(*size)


def test_pipeline_spec():
    spec = pipeline_spec("bgra8unorm")
    assert spec.surface_format == "bgra8unorm"
    assert (spec.vertex_entry, spec.fragment_entry) == ("vs_main", "fs_main")
    assert spec.buffers == (vertex_layout(), instance_layout())


def test_scene_resources():
    scene = Scene(800, 600)
    assert scene.resolution() == (800.0, 600.0)
    assert scene.num_indices == len(INDICES)
    assert scene.instance_count == 1
    assert len(scene.vertex_data) == len(VERTICES) * vertex_layout().array_stride
    assert len(scene.instance_data) == instance_layout().array_stride


def test_scene_frame_updates_camera():
    scene = Scene(800, 600)
    data = scene.frame()
    assert data == scene.camera_ubo
    assert len(data) == 64
    assert np.allclose(scene.camera.eye, scene.camera.orbit_eye())


def test_scene_frame_follows_zoom():
    scene = Scene(800, 600)
    before = scene.frame()
    scene.controller.wheel(300.0)
    after = scene.frame()
    assert before != after
    assert scene.camera.distance == pytest.approx(8.0)


def test_scene_rejects_bad_size():
    with pytest.raises(ValueError):
        Scene(0, 600)