from aiohttp import web
import logging
from .store import Bird, BirdStore
from .server import json_response

logger = logging.getLogger("aviary")

GREETING = "Hello World"
CREATED_REDIRECT = "/assets/"

async def hello(method: str, path: str, request: web.Request):
    return web.Response(text=GREETING)


class BirdHandlers:
    """Create and list handlers bound to one BirdStore."""

    def __init__(self, store: BirdStore):
        self.store = store

    async def create_bird(self, method: str, path: str, request: web.Request):
        # missing fields, or a body that isn't a readable form, count as empty strings
        try:
            form = await request.post()
        except (UnicodeDecodeError, LookupError, ValueError):
            logger.info("Unreadable bird form, storing empty fields")
            form = {}
        bird = Bird(
            species=str(form.get("species", "")),
            description=str(form.get("description", "")),
        )
        self.store.add(bird)
        logger.info(f"Added bird {bird.species!r}")
        return web.Response(status=302, headers={"Location": CREATED_REDIRECT})

    async def get_birds(self, method: str, path: str, request: web.Request):
        return json_response([bird.to_dict() for bird in self.store.all()])
