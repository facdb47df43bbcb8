"""HTTP entry point: builds the FastAPI app and serves it with uvicorn.

    termsketch-serve            # host/port from TERMSKETCH_HOST / TERMSKETCH_PORT
"""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from termsketch import __version__
from termsketch.config import Settings, settings
from termsketch.utils.log import parse_level, setup_logging

logger = logging.getLogger(__name__)


def _install_cors(app: FastAPI, origins: list[str]) -> None:
    if not origins:
        return
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )


def create_app(config: Settings | None = None) -> FastAPI:
    """Assemble the API; ``config`` defaults to the environment settings."""
    config = config or settings
    app = FastAPI(title="termsketch", version=__version__)
    _install_cors(app, config.cors_origins)

    # registers every @primitive before the router looks them up
    import termsketch.engine.primitives  # noqa: F401
    from termsketch.api.router import api_router

    app.include_router(api_router)
    logger.info("termsketch %s ready (%s)", __version__, config.termsketch_env)
    return app


load_dotenv()
setup_logging(parse_level(settings.termsketch_log_level))
app = create_app()


def run() -> None:
    """Serve ``app`` with uvicorn; needs the ``serve`` extra."""
    import uvicorn

    uvicorn.run(
        app,
        host=settings.termsketch_host,
        port=settings.termsketch_port,
        log_level=settings.termsketch_log_level.lower(),
    )


if __name__ == "__main__":
    run()
