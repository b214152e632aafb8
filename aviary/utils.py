import os
import mimetypes
import hashlib
from datetime import datetime, timezone
from typing import Optional

mimetypes.init()

TEXT_TYPES = ("application/javascript", "application/json", "image/svg+xml")

def guess_mime_type(path: str) -> str:
    mime, _ = mimetypes.guess_type(path)
    if mime is None:
        return "application/octet-stream"
    if mime.startswith("text/") or mime in TEXT_TYPES:
        return f"{mime}; charset=utf-8"
    return mime

def file_mtime(path: str) -> Optional[datetime]:
    try:
        return datetime.fromtimestamp(os.path.getmtime(path), tz=timezone.utc)
    except OSError:
        return None

def http_date(when: datetime) -> str:
    return when.strftime("%a, %d %b %Y %H:%M:%S GMT")

def compute_etag_bytes(data: bytes) -> str:
    h = hashlib.sha1()
    h.update(data)
    return f'"{h.hexdigest()}"'
