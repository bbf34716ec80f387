"""
Lifecycle-scoped song state: the seed coordinator and the genre cache.

One instance is created per app in the lifespan handler (see `api/main.py`)
and stored on `app.state.catalog`.
"""

from __future__ import annotations

from .genres import GenreCache
from .seeding import SeedCoordinator, SeedReport


class SongCatalog:
    def __init__(
        self,
        *,
        seeder: SeedCoordinator | None = None,
        genres: GenreCache | None = None,
    ) -> None:
        self.seeder = seeder or SeedCoordinator()
        self.genres = genres or GenreCache()

    async def ensure_ready(self) -> None:
        """
        Seed the collection if needed, then make sure the genre list is loaded.
        """
        report = await self.seed_if_empty()
        if report.inserted:
            self.genres.invalidate()
        await self.genres.get()

    async def seed_if_empty(self) -> SeedReport:
        return await self.seeder.seed_if_empty()
