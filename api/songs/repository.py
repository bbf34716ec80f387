"""
Song persistence.
This module is where song-related MongoDB queries live.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from core import db

from .normalizer import NO_GENRE
from .schemas import SongDocument


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


async def count_songs() -> int:
    return int(await db.collection(db.SONGS).count_documents({}))


async def insert_songs(songs: list[dict[str, Any]]) -> int:
    """
    Validate and insert a batch of songs in one `insert_many` call.

    Returns the number of inserted documents. Validation errors propagate
    and nothing is inserted.
    """
    if not songs:
        return 0

    now = _utc_now()
    documents = [
        {**SongDocument.model_validate(song).model_dump(), "createdAt": now, "updatedAt": now}
        for song in songs
    ]
    result = await db.collection(db.SONGS).insert_many(documents)
    return len(result.inserted_ids)


async def distinct_genres() -> list[str]:
    genres = await db.collection(db.SONGS).distinct(
        "artist_genre",
        {"artist_genre": {"$ne": NO_GENRE}},
    )
    return [str(g) for g in genres]


async def random_song_by_genre(genre: str) -> dict[str, Any] | None:
    cursor = await db.collection(db.SONGS).aggregate(
        [
            {"$match": {"artist_genre": genre}},
            {"$sample": {"size": 1}},
        ]
    )
    rows = await cursor.to_list(length=1)
    return db.document_to_dict(rows[0]) if rows else None
