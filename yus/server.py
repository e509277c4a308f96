"""Static file server for the single-page site with an index.html fallback."""

from __future__ import annotations

import argparse
import functools
import os
import posixpath
from http import HTTPStatus
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from urllib.parse import unquote, urlsplit

INDEX_FILE = "index.html"
ASSETS_PREFIX = "assets"


def _clean_parts(path: str) -> list[str]:
    route = unquote(urlsplit(path).path)
    return [
        part
        for part in posixpath.normpath(route).split("/")
        if part and part not in (".", "..")
    ]


class SpaRequestHandler(SimpleHTTPRequestHandler):
    """Serves the bundle directory, then ``/assets``, then falls back to index.html."""

    def __init__(self, *args, dist_dir, assets_dir, **kwargs):
        self.dist_dir = Path(dist_dir)
        self.assets_dir = Path(assets_dir)
        super().__init__(*args, directory=str(self.dist_dir), **kwargs)

    @staticmethod
    def _servable(candidate: Path, allow_index: bool) -> bool:
        if candidate.is_file():
            return True
        return allow_index and candidate.is_dir() and (candidate / INDEX_FILE).is_file()

    def translate_path(self, path: str) -> str:
        parts = _clean_parts(path)
        bundled = self.dist_dir.joinpath(*parts)
        if self._servable(bundled, allow_index=True):
            return str(bundled)
        if parts and parts[0] == ASSETS_PREFIX:
            asset = self.assets_dir.joinpath(*parts[1:])
            if self._servable(asset, allow_index=False):
                return str(asset)
        return str(self.dist_dir / INDEX_FILE)

    def list_directory(self, path):
        self.send_error(HTTPStatus.NOT_FOUND, "File not found")
        return None


def make_server(dist_dir, assets_dir, host="127.0.0.1", port=3000) -> ThreadingHTTPServer:
    """A threaded HTTP server bound to ``host:port`` serving the site."""
    handler = functools.partial(SpaRequestHandler, dist_dir=dist_dir, assets_dir=assets_dir)
    return ThreadingHTTPServer((host, port), handler)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Serve the site bundle.")
    parser.add_argument("--dist", default="../dist", help="directory of the built bundle")
    parser.add_argument("--assets", default="../assets", help="directory served at /assets")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=3000)
    args = parser.parse_args(argv)

    print(os.getcwd())
    server = make_server(args.dist, args.assets, args.host, args.port)
    with server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())