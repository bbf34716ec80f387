"""
Process-wide genre list.

Loaded lazily on first use and kept for the life of the process.
Call `invalidate()` or `refresh()` after writes that add new genres.
"""

from __future__ import annotations

import asyncio
import logging

from . import repository

logger = logging.getLogger(__name__)


class GenreCache:
    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._genres: list[str] | None = None

    @property
    def loaded(self) -> bool:
        return self._genres is not None

    async def get(self) -> list[str]:
        if self._genres is not None:
            return list(self._genres)
        async with self._lock:
            if self._genres is None:
                await self._load()
            return list(self._genres or [])

    async def refresh(self) -> list[str]:
        async with self._lock:
            await self._load()
            return list(self._genres or [])

    def invalidate(self) -> None:
        self._genres = None

    async def _load(self) -> None:
        genres = await repository.distinct_genres()
        self._genres = sorted(genres)
        logger.info("genres_loaded count=%s", len(self._genres))
