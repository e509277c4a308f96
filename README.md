# yus

A small personal site in Python. It contains a static file server for a built
single-page bundle, the site's pages rendered as HTML strings, and the
CPU-side data behind an interactive 3-D cube demo. That data covers the orbit
camera, the matrices, the mesh, and the GPU buffer layouts.

## Install

```
pip install .
```

## Running the server

```
yus
```

This serves on `127.0.0.1:3000`. The options are:

- `--dist`: the directory of the built bundle (default `../dist`).
- `--assets`: the directory served under `/assets` (default `../assets`).
- `--host` and `--port`: where the server listens.

Run `yus --help` to see them all. The server prints the current working
directory when it starts. Stop it with Ctrl-C.

`yus.server.make_server(dist_dir, assets_dir, host, port)` returns the
threaded server without starting it.

### How requests are served

`SpaRequestHandler.translate_path` looks up each request in this order:

1. A file in the bundle directory, or a bundle directory that holds an
   `index.html`.
2. For paths under `/assets/`, a file in the assets directory.
3. Otherwise, the bundle's `index.html`, so that a client-side router can
   handle the path.

The handler never lists a directory. It answers such a request with 404.

## Pages

`yus.pages` builds HTML for each route:

| Path          | Function         |
|---------------|------------------|
| `/`           | `home()`         |
| `/demos`      | `demos_menu()`   |
| `/demos/cube` | `cube_demo()`    |
| `/classic`    | `classic_main()` |

- `resolve(path)` returns the page function for a path. It ignores the query
  string and a trailing slash. Any other path gets `not_found()`, which
  renders "404 – not found". The demos menu links to `/demos/mandelbrot`, but
  no route exists for it, so that path resolves to `not_found()`.
- `app_shell(body)` wraps a body in a full document. The document has the
  stylesheet link, a header with links to `/` and `/demos`, and a footer.
- `render(path)` is `app_shell(resolve(path)())`.

```python
from yus.pages import render

html = render("/demos")
```

## Scene code

- `yus.linalg` builds right-handed matrices and packs them into
  column-major `float32` bytes. It provides:
  - `perspective_rh_gl`, a perspective projection with depth mapped to -1..1
  - `look_at_rh`
  - `translation`
  - `cols_array_2d` and `matrix_bytes`
- `yus.camera.Camera` orbits `target` at `distance`, steered by `yaw` and
  `pitch`:
  - `orbit_eye()` computes the eye position.
  - `update_eye()` moves the eye to that position.
  - `view_proj(aspect)` returns projection × view, with a 45° field of view
    and near/far planes at 0.1 and 100.
- `yus.camera.OrbitController` turns mouse events into camera changes:
  - Dragging with the left button (`mouse_down`, `mouse_move`, `mouse_up`)
    changes yaw and pitch by 0.005 radians per pixel. Pitch is clamped to
    ±(π/2 − 0.01).
  - `wheel(delta_y)` changes the distance by `delta_y × 0.01`. The distance
    stays between 1 and 50.
- `yus.mesh` holds the cube's 24 vertices and 36 indices (`VERTICES`,
  `INDICES`), plus the `Vertex` and `InstanceRaw` types and their byte
  packing. `vertex_layout()` describes the vertex buffer (shader locations
  0–2). `instance_layout()` describes the per-instance buffer (locations
  3–6).
- `yus.uniform.Uniforms` holds time, centre and zoom, and packs them into a
  24-byte padded block.
- `yus.scene` describes the GPU objects:
  - `uniform_bind_group_layout()` lists the bind-group entries.
  - `initial_ubos(width, height)` returns the initial camera, model and
    light buffer contents.
  - `material_bytes(colours)` packs the material colours.
  - `pipeline_spec(surface_format)` describes the render pipeline.
  - `Scene(width, height)` gathers all of this. Its `frame()` method updates
    the camera and returns the new camera buffer data.

```python
from yus.scene import Scene

scene = Scene(800, 600)
scene.controller.mouse_down(0, 900, 700)
scene.controller.mouse_move(950, 700)
scene.controller.mouse_up()
scene.controller.wheel(100)

camera_ubo = scene.frame()  # 64 bytes, column-major float32
```

## What it does not do

- The server only serves files that already exist. It does not build the
  client bundle, and it does not use `yus.pages`. Those pages are only
  available by calling the functions directly.
- The scene code produces buffer contents and pipeline descriptions but
  never talks to a GPU. No shaders, textures or windows are included, and
  nothing is drawn.

## Tests

```
pip install .[test]
pytest
```