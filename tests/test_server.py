import threading
import urllib.request
from pathlib import Path

import pytest

from yus.server import SpaRequestHandler, main, make_server


@pytest.fixture
def site(tmp_path):
    dist = tmp_path / "dist"
    assets = tmp_path / "assets"
    dist.mkdir()
    assets.mkdir()
    (dist / "index.html").write_text("INDEX")
    (dist / "app.js").write_text("APP")
    (assets / "logo.png").write_bytes(b"LOGO")
    (tmp_path / "private.txt").write_text("PRIVATE")
    return dist, assets


@pytest.fixture
def base_url(site):
    dist, assets = site
    server = make_server(dist, assets, "127.0.0.1", 0)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    host, port = server.server_address[:2]
    yield f"http://{host}:{port}"
    server.shutdown()
    server.server_close()


def _get(url):
    with urllib.request.urlopen(url, timeout=5) as response:
        return response.status, response.read()


def _handler(dist, assets):
    handler = SpaRequestHandler.__new__(SpaRequestHandler)
    handler.dist_dir = Path(dist)
    handler.assets_dir = Path(assets)
    return handler


def test_translate_path_bundle_file(site):
    dist, assets = site
    assert _handler(dist, assets).translate_path("/app.js") == str(dist / "app.js")


def test_translate_path_assets(site):
    dist, assets = site
    assert _handler(dist, assets).translate_path("/assets/logo.png?v=2") == str(
        assets / "logo.png"
    )


def test_translate_path_fallback(site):
    dist, assets = site
    handler = _handler(dist, assets)
    assert handler.translate_path("/demos/cube") == str(dist / "index.html")
    assert handler.translate_path("/assets/missing.png") == str(dist / "index.html")
    assert handler.translate_path("/../private.txt") == str(dist / "index.html")


def test_serves_index_at_root(base_url):
    assert _get(base_url + "/") == (200, b"INDEX")


def test_serves_bundle_file(base_url):
    assert _get(base_url + "/app.js") == (200, b"APP")


def test_serves_assets(base_url):
    assert _get(base_url + "/assets/logo.png") == (200, b"LOGO")


def test_spa_fallback(base_url):
    assert _get(base_url + "/classic") == (200, b"INDEX")


def test_traversal_stays_inside(base_url):
    status, body = _get(base_url + "/%2e%2e/private.txt")
    assert body == b"INDEX"
    assert status == 200


def test_main_rejects_bad_port():
    with pytest.raises(SystemExit) as excinfo:
        main(["--port", "abc"])
    assert excinfo.value.code == 2