"""Main FastAPI server for the Revolt voice assistant relay."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from contextlib import asynccontextmanager

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, WebSocket
from fastapi.staticfiles import StaticFiles
from fastapi.responses import ORJSONResponse
from fastapi.middleware.cors import CORSMiddleware

from src.state import RuntimeDeps
from src.config.websocket import WS_ENDPOINT_PATH
from src.runtime.logging import configure_logging
from src.runtime.settings_loader import load_settings
from src.runtime.dependencies import build_runtime_deps
from src.handlers.websocket.manager import handle_websocket_connection

logger = logging.getLogger(__name__)

load_dotenv()
configure_logging()


def create_app(runtime_deps: RuntimeDeps | None = None) -> FastAPI:
    settings = runtime_deps.settings if runtime_deps is not None else load_settings()

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        app.state.runtime_deps = runtime_deps or build_runtime_deps(settings)
        logger.info("runtime: ready")
        try:
            yield
        finally:
            await app.state.runtime_deps.shutdown()

    app = FastAPI(default_response_class=ORJSONResponse, lifespan=_lifespan)
    app.state.settings = settings
    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

    @app.get("/health")
    async def health() -> dict[str, object]:
        deps: RuntimeDeps | None = getattr(app.state, "runtime_deps", None)
        return {
            "status": "healthy",
            "activeSessions": deps.sessions.count() if deps is not None else 0,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    @app.websocket(WS_ENDPOINT_PATH)
    async def websocket_endpoint(websocket: WebSocket) -> None:
        deps: RuntimeDeps | None = getattr(app.state, "runtime_deps", None)
        if deps is None:
            raise RuntimeError("Runtime dependencies are not initialized")
        await handle_websocket_connection(websocket, deps)

    # Mounted last so /health and the WebSocket route take precedence over "/".
    static_dir = settings.server.static_dir
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(static_dir), html=True), name="static")
    else:
        logger.info("static dir %s not found; client page not served", static_dir)

    return app


app = create_app()


def main() -> None:
    settings = app.state.settings
    logger.info("Revolt voice assistant server on http://%s:%s", settings.server.host, settings.server.port)
    uvicorn.run(app, host=settings.server.host, port=settings.server.port, log_config=None)


if __name__ == "__main__":
    main()
