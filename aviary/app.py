from typing import Optional
from .server import HTTPServer
from .store import BirdStore
from .handlers import BirdHandlers, hello


def new_router(store: Optional[BirdStore] = None, assets_root="assets", **kwargs) -> HTTPServer:
    """
    Build a server with the greeting, bird and asset routes registered.

    Every call gets a fresh BirdStore unless one is passed in.
    """
    store = store if store is not None else BirdStore()
    server = HTTPServer(assets_root=assets_root, **kwargs)
    birds = BirdHandlers(store)

    server.route("/")(hello)
    server.route("/hello")(hello)
    server.route("/bird", methods=["GET"])(birds.get_birds)
    server.route("/bird", methods=["POST"])(birds.create_bird)
    return server
