import asyncio
from aviary.app import new_router

server = new_router(assets_root="assets")

if __name__ == "__main__":
    try:
        asyncio.run(server.run())
    except KeyboardInterrupt:
        print("Shutting down aviary...")
