import aiofiles
from aiohttp import web
from pathlib import Path
from datetime import datetime, timezone
from .utils import guess_mime_type, file_mtime, http_date, compute_etag_bytes

INDEX_FILE = "index.html"

async def read_file_bytes(path: Path) -> bytes:
    async with aiofiles.open(path, "rb") as f:
        return await f.read()

def strip_prefix(url_path: str, prefix: str) -> str:
    if url_path.startswith(prefix):
        return url_path[len(prefix):]
    return url_path.lstrip("/")

async def handle_static_request(request: web.Request, filesystem_root: str, prefix: str = "/assets/"):
    """
    Static asset handler:
    - strip the URL prefix and map the rest onto filesystem_root
    - a directory serves its index.html
    - anything resolving outside the root -> 403
    - else 404
    """
    root = Path(filesystem_root).resolve()

    try:
        joined = (root / strip_prefix(request.path, prefix)).resolve()
    except (ValueError, OSError):
        return web.Response(status=404, text="Not Found")
    if joined != root and root not in joined.parents:
        return web.Response(status=403, text="Forbidden")

    if joined.is_dir():
        joined = joined / INDEX_FILE

    if joined.is_file():
        return await _serve_file(joined, request)

    return web.Response(status=404, text="Not Found")

async def _serve_file(path: Path, request: web.Request):
    body_bytes = await read_file_bytes(path)
    etag = compute_etag_bytes(body_bytes)
    headers = {
        "Content-Type": guess_mime_type(str(path)),
        "ETag": etag,
        "Cache-Control": "public, max-age=60",
        "Last-Modified": http_date(file_mtime(str(path)) or datetime.now(timezone.utc)),
    }
    if request.headers.get("If-None-Match") == etag:
        return web.Response(status=304, headers=headers)
    return web.Response(body=body_bytes, headers=headers)
