import struct

from yus.uniform import Uniforms


def test_default_block_size_and_values():
    data = Uniforms().to_bytes()
    assert len(data) == 24
    time, pad0, cx, cy, zoom, pad1 = struct.unpack("<6f", data)
    assert (time, cx, cy, zoom) == (0.0, -0.0, -1.0, 1.0)
    assert pad0 == 0.0 and pad1 == 0.0


def test_custom_values_round_trip():
    u = Uniforms(time=2.5, center=(0.25, -0.5), zoom=4.0)
    time, _, cx, cy, zoom, _ = struct.unpack("<6f", u.to_bytes())
    assert (time, (cx, cy), zoom) == (u.time, u.center, u.zoom)


def test_center_offset_is_aligned():
    data = Uniforms(center=(0.75, 0.125)).to_bytes()
    assert struct.unpack_from("<2f", data, 8) == (0.75, 0.125)