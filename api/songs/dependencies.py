"""
Song dependencies for FastAPI routes.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, Request, status

from .catalog import SongCatalog

logger = logging.getLogger(__name__)


def get_catalog(request: Request) -> SongCatalog:
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Song catalog is not initialized.",
        )
    return catalog


async def ensure_ready(request: Request) -> None:
    """
    Router-level gate: seed on first use and warm the genre cache.
    """
    catalog = get_catalog(request)
    try:
        await catalog.ensure_ready()
    except Exception as e:
        logger.exception("server_init_failed path=%s", request.url.path)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e) or "Server init failed",
        ) from e
