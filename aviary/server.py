from aiohttp import web
from typing import Callable, Dict, Awaitable, Optional
import asyncio
from pathlib import Path
from .static import handle_static_request
import json
import logging

logger = logging.getLogger("aviary")
logging.basicConfig(level=logging.INFO, format="[aviary] %(message)s")

HandlerType = Callable[[str, str, web.Request], Awaitable[web.StreamResponse]]

ASSET_METHODS = ("GET", "HEAD")

class HTTPServer:
    def __init__(self, host="127.0.0.1", port=8080, assets_root="assets", assets_prefix="/assets/"):
        self.host = host
        self.port = port
        self.assets_root = Path(assets_root).resolve()
        self.assets_prefix = assets_prefix
        self._routes: Dict[str, Dict[str, HandlerType]] = {}
        self._app = web.Application()
        self._app.router.add_route('*', '/{tail:.*}', self._catch_all)
        logger.info(f"Asset root set to {self.assets_root}")

    @property
    def app(self) -> web.Application:
        return self._app

    def route(self, path: str, methods: Optional[list]=None):
        """
        Decorator to register handler functions for exact (method, path) pairs.

        Handler signature (async):
        async def handler(method: str, path: str, request: aiohttp.web.Request) -> aiohttp.web.Response
        """
        methods = [m.upper() for m in (methods or ["GET"])]
        def decorator(fn: HandlerType):
            by_method = self._routes.setdefault(path, {})
            for method in methods:
                by_method[method] = fn
            logger.info(f"Registered route {path} [{','.join(methods)}]")
            return fn
        return decorator

    def allowed_methods(self, path: str) -> list:
        return sorted(self._routes.get(path, {}))

    async def _catch_all(self, request: web.Request):
        path = request.path
        method = request.method.upper()

        by_method = self._routes.get(path)
        if by_method is not None:
            handler = by_method.get(method)
            if handler is None:
                return self._method_not_allowed(self.allowed_methods(path))
            return await self._dispatch(handler, method, path, request)

        if path.startswith(self.assets_prefix):
            if method not in ASSET_METHODS:
                return self._method_not_allowed(ASSET_METHODS)
            return await handle_static_request(request, filesystem_root=str(self.assets_root), prefix=self.assets_prefix)

        raise web.HTTPNotFound()

    async def _dispatch(self, handler: HandlerType, method: str, path: str, request: web.Request):
        try:
            result = await handler(method, path, request)
            if isinstance(result, web.StreamResponse):
                return result
            return web.Response(text=str(result))
        except web.HTTPException:
            raise
        except Exception:
            logger.exception("Route handler error")
            return web.Response(status=500, text="Internal Server Error")

    @staticmethod
    def _method_not_allowed(methods) -> web.Response:
        return web.Response(status=405, headers={"Allow": ", ".join(methods)})

    async def run(self):
        runner = web.AppRunner(self._app)
        await runner.setup()
        site = web.TCPSite(runner, host=self.host, port=self.port)
        logger.info(f"Starting aviary on http://{self.host}:{self.port}")
        await site.start()
        try:
            while True:
                await asyncio.sleep(3600)
        finally:
            await runner.cleanup()


def json_response(data, status=200):
    return web.Response(text=json.dumps(data), status=status, content_type="application/json")
