"""
Sidediff Backend - FastAPI Application Entry Point
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from sidediff.errors import (
    ConfigError,
    DiffCancelledError,
    InvalidInputError,
    ResourceExceededError,
    SidediffError,
)
from sidediff.routers import config, diff
from sidediff.services.config_manager import ConfigManager

logger = logging.getLogger(__name__)

_ERROR_STATUS = {
    InvalidInputError: 400,
    ResourceExceededError: 413,
    DiffCancelledError: 409,
    ConfigError: 500,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - startup and shutdown logic"""
    logger.info("[Backend] Starting Sidediff Backend...")
    config_manager = ConfigManager.get_instance()
    logger.info("[Backend] ConfigManager initialized (%s)", config_manager.config_file)
    logger.info("[Backend] LCS table limit: %s cells", config_manager.get_max_cells() or "unlimited")

    yield
    logger.info("[Backend] Shutting down Sidediff Backend...")


async def sidediff_error_handler(request: Request, exc: SidediffError) -> JSONResponse:
    """Map the sidediff exception hierarchy to JSON error responses"""
    status_code = next(
        (code for cls, code in _ERROR_STATUS.items() if isinstance(exc, cls)),
        500,
    )
    logger.warning("[Backend] %s on %s: %s", type(exc).__name__, request.url.path, exc)
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def create_app() -> FastAPI:
    """Build the FastAPI application"""
    app = FastAPI(
        title="Sidediff Backend",
        description="Line and token level text diff service",
        version="1.0.0",
        lifespan=lifespan,
    )

    # CORS middleware for browser front ends served from another origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(SidediffError, sidediff_error_handler)

    # Include routers
    app.include_router(diff.router, prefix="/api/diff", tags=["diff"])
    app.include_router(config.router, prefix="/api/config", tags=["config"])

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "service": "sidediff-backend"}

    return app


app = create_app()


def main() -> None:
    import uvicorn

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    server = ConfigManager.get_instance().get("server", {})
    uvicorn.run(app, host=server.get("host", "127.0.0.1"), port=int(server.get("port", 8000)))


if __name__ == "__main__":
    main()
