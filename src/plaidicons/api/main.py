"""Plaidicons: FastAPI Application.

This module defines the FastAPI ``app`` instance, the REST API routes, and the
``main()`` function that launches the uvicorn server.

Architecture
------------
The application is stateless: every request renders its icon from the seed
and size it carries. The only object kept on ``app.state`` is the
:class:`~plaidicons.core.generator.IconGenerator`, which holds the settings
loaded at startup.

Generation is CPU bound, so the icon routes are plain ``def`` functions and
FastAPI runs them in its threadpool. Concurrent requests share no mutable
state.

Endpoints
---------
========  ================  ==========================================
Method    Path              Purpose
========  ================  ==========================================
GET       ``/api/health``   Liveness check
GET       ``/api/config``   Active pipeline settings
GET       ``/api/icon``     Render an icon from query parameters
POST      ``/api/icon``     Render an icon from a JSON body
========  ================  ==========================================

Icon responses are ``image/png``; the seed and size actually used are
returned in the ``X-Plaidicons-Seed`` (percent-encoded UTF-8) and
``X-Plaidicons-Size`` headers.

Usage
-----
CLI (installed entry point)::

    plaidicons-server

Direct invocation::

    python -m plaidicons.api.main
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from urllib.parse import quote

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import Response

from plaidicons import __version__
from plaidicons.api.models import ConfigResponse, IconRequest
from plaidicons.core.config import settings
from plaidicons.core.errors import InvalidSizeError, PlaidiconsError
from plaidicons.core.generator import GenerationOptions, IconGenerator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the icon generator on startup.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control back to the application for the duration of its lifetime.
    """
    app.state.generator = IconGenerator(settings)
    logger.info("IconGenerator initialised.")

    yield


app = FastAPI(
    title="Plaidicons",
    description="Deterministic plaid icon generation API.",
    version=__version__,
    lifespan=lifespan,
)


def _render(seed: str | None, size: int | None) -> Response:
    """Render an icon and wrap it in a PNG response.

    Args:
        seed: Requested seed, or ``None`` for a random one.
        size: Requested size, or ``None`` for the configured default.

    Returns:
        ``image/png`` response with seed and size headers.

    Raises:
        HTTPException: 400 for an invalid or oversized size, 500 when the
            pipeline fails.
    """
    generator: IconGenerator = app.state.generator

    try:
        options = GenerationOptions(size=size, seed=seed).resolve(generator.settings)
    except InvalidSizeError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except PlaidiconsError as e:
        raise HTTPException(status_code=500, detail=str(e)) from e

    if options.size > generator.settings.max_size:
        raise HTTPException(
            status_code=400,
            detail=f"size must be at most {generator.settings.max_size}",
        )

    try:
        png = generator.generate(size=options.size, seed=options.seed)
    except PlaidiconsError as e:
        logger.error(f"Icon generation failed: {e}")
        raise HTTPException(status_code=500, detail=f"Icon generation failed: {e}") from e

    return Response(
        content=png,
        media_type="image/png",
        headers={
            "X-Plaidicons-Seed": quote(options.seed, safe=""),
            "X-Plaidicons-Size": str(options.size),
        },
    )


@app.get("/api/health")
async def health() -> dict:
    """Return a minimal liveness payload."""
    return {"status": "ok", "version": __version__}


@app.get("/api/config", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Return the pipeline settings that shape generated icons."""
    generator: IconGenerator = app.state.generator
    return ConfigResponse(
        version=__version__,
        default_size=generator.settings.default_size,
        max_size=generator.settings.max_size,
        **generator.settings.variant(),
    )


@app.get("/api/icon")
def get_icon(
    seed: str | None = Query(default=None, description="Seed string."),
    size: int | None = Query(default=None, description="Output size in pixels."),
) -> Response:
    """Render an icon from query parameters.

    Example: ``GET /api/icon?seed=slackicons&size=256``
    """
    return _render(seed, size)


@app.post("/api/icon")
def post_icon(req: IconRequest) -> Response:
    """Render an icon from a JSON body."""
    return _render(req.seed, req.size)


def main() -> None:
    """Launch the uvicorn ASGI server.

    Reads host and port from :data:`~plaidicons.core.config.settings` (which
    loads from ``PLAIDICONS_SERVER_HOST`` and ``PLAIDICONS_SERVER_PORT``
    environment variables). Defaults to ``0.0.0.0:7860``.

    This function is registered as the ``plaidicons-server`` console script
    in ``pyproject.toml``.
    """
    import uvicorn

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    uvicorn.run(
        "plaidicons.api.main:app",
        host=settings.server_host,
        port=settings.server_port,
        reload=False,
    )


if __name__ == "__main__":
    main()
