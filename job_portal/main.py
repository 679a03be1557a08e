# main.py
from __future__ import annotations

import logging
import random
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from job_portal.config import Settings, settings
from job_portal.logging_config import configure_logging
from job_portal.mcp_server import MCPEndpoint, PortalMCPServer
from job_portal.registry import build_portal_registry
from job_portal.routers.health import router as health_router
from job_portal.routers.tools import router as tools_router
from job_portal.services.record_store import PortalStore


logger = logging.getLogger(__name__)


def create_app(app_settings: Settings | None = None, *, rng: random.Random | None = None) -> FastAPI:
    cfg = app_settings or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # One store per process lifetime; every handler reaches it through the registry.
        store = PortalStore()
        registry = build_portal_registry(store, cfg, rng=rng)
        mcp_server = PortalMCPServer(registry, name=cfg.app_name, version=cfg.version)
        session_manager = mcp_server.session_manager()

        app.state.settings = cfg
        app.state.store = store
        app.state.registry = registry
        app.state.mcp_session_manager = session_manager

        async with session_manager.run():
            logger.info("%s %s ready, MCP endpoint at %s", cfg.app_name, cfg.version, cfg.mcp_path)
            yield
        logger.info("%s shutting down", cfg.app_name)

    application = FastAPI(
        title=cfg.app_name,
        version=cfg.version,
        debug=cfg.debug,
        lifespan=lifespan,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Mcp-Session-Id"],
    )

    application.include_router(health_router)
    application.include_router(tools_router)
    application.add_route(cfg.mcp_path, MCPEndpoint(), include_in_schema=False)
    return application


def run() -> int:
    configure_logging(settings.log_level)
    config = uvicorn.Config(
        create_app(),
        host=settings.host,
        port=settings.port,
        log_config=None,
        log_level=settings.log_level.lower(),
    )
    server = uvicorn.Server(config)
    try:
        server.run()
    except OSError as exc:
        logger.critical("Server failed to start on %s:%s: %s", settings.host, settings.port, exc)
        return 1
    except SystemExit as exc:
        # uvicorn exits with status 1 when it cannot bind.
        if exc.code not in (None, 0):
            logger.critical("Server failed to start on %s:%s (exit status %s)", settings.host, settings.port, exc.code)
            return 1
        raise
    if not server.started:
        logger.critical("Server failed to start on %s:%s", settings.host, settings.port)
        return 1
    return 0
