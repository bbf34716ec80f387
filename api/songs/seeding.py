"""
One-time song collection seeding from the CSV dataset.

The coordinator only acts on a literally empty collection, so running it on
every process start (or every request) never duplicates data. It does not
deduplicate against a partial earlier seed.

Within one process the work runs at most once: an asyncio.Lock serializes
cold-start callers and a completion flag short-circuits everyone after.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path

from core import settings

from . import dataset, repository
from .normalizer import is_persistable, normalize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeedReport:
    status: str
    records_read: int = 0
    inserted: int = 0


class SeedCoordinator:
    def __init__(
        self,
        *,
        csv_path: str | Path | None = None,
        mark_complete_on_error: bool | None = None,
    ) -> None:
        self.csv_path = Path(csv_path if csv_path is not None else settings.seed_csv_path())
        self.mark_complete_on_error = (
            settings.seed_mark_complete_on_error() if mark_complete_on_error is None else mark_complete_on_error
        )
        self._lock = asyncio.Lock()
        self._complete = False

    @property
    def complete(self) -> bool:
        return self._complete

    async def seed_if_empty(self) -> SeedReport:
        if self._complete:
            return SeedReport(status="skipped_already_seeded")

        async with self._lock:
            # Another caller may have finished while we waited for the lock.
            if self._complete:
                return SeedReport(status="skipped_already_seeded")
            return await self._seed_locked()

    async def _seed_locked(self) -> SeedReport:
        song_count = await repository.count_songs()
        if song_count > 0:
            self._complete = True
            return SeedReport(status="skipped_not_empty")

        if not self.csv_path.exists():
            logger.info("seed_skipped reason=missing_dataset path=%s", self.csv_path)
            self._complete = True
            return SeedReport(status="skipped_missing_dataset")

        try:
            records = await dataset.read_dataset(self.csv_path)
        except (dataset.DatasetError, OSError, UnicodeDecodeError):
            logger.exception(
                "seed_failed path=%s mark_complete=%s",
                self.csv_path,
                self.mark_complete_on_error,
            )
            if self.mark_complete_on_error:
                self._complete = True
            return SeedReport(status="failed")

        missing = dataset.missing_columns(records)
        if missing:
            logger.warning("seed_dataset_missing_columns path=%s columns=%s", self.csv_path, missing)

        songs = [song for song in (normalize(r) for r in records) if is_persistable(song)]

        # Persistence errors propagate; the flag stays unset so the next call retries.
        inserted = await repository.insert_songs(songs) if songs else 0

        self._complete = True
        logger.info(
            "seed_complete path=%s records_read=%s inserted=%s",
            self.csv_path,
            len(records),
            inserted,
        )
        return SeedReport(status="seeded", records_read=len(records), inserted=inserted)
