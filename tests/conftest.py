import pytest

from aviary.app import new_router
from aviary.store import Bird, BirdStore

INDEX_HTML = "<!DOCTYPE html><html><body><h1>Birds</h1></body></html>"


@pytest.fixture
def assets_dir(tmp_path):
    root = tmp_path / "assets"
    root.mkdir()
    (root / "index.html").write_text(INDEX_HTML, encoding="utf-8")
    (root / "style.css").write_text("body { color: black; }", encoding="utf-8")
    (root / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n")
    nested = root / "docs"
    nested.mkdir()
    (nested / "index.html").write_text("<p>docs</p>", encoding="utf-8")
    (root / "empty").mkdir()
    (tmp_path / "secret.txt").write_text("outside the root", encoding="utf-8")
    return root


@pytest.fixture
def store():
    return BirdStore([Bird("sparrow", "A small harmless bird")])


@pytest.fixture
def server(store, assets_dir):
    return new_router(store=store, assets_root=str(assets_dir))


@pytest.fixture
async def client(aiohttp_client, server):
    return await aiohttp_client(server.app)
