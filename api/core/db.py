"""
Async MongoDB access helpers using PyMongo's asyncio client.

This module owns the client. FastAPI initializes it on startup and
closes it on shutdown (see `api/main.py`).

Collections:
- songs   (seeded from CSV, indexed on artist_genre)
- kebabs
"""

from __future__ import annotations

from typing import Any

from pymongo import ASCENDING, AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase

from . import settings

SONGS = "songs"
KEBABS = "kebabs"

_client: AsyncMongoClient | None = None
_db_name: str | None = None


async def init_client() -> None:
    global _client, _db_name
    if _client is not None:
        return None
    _client = AsyncMongoClient(
        settings.mongo_uri(),
        serverSelectionTimeoutMS=settings.server_selection_timeout_ms(),
        tz_aware=True,
    )
    _db_name = settings.db_name()


async def close_client() -> None:
    global _client, _db_name
    if _client is None:
        return None
    await _client.close()
    _client = None
    _db_name = None


def database() -> AsyncDatabase:
    if _client is None or _db_name is None:
        raise RuntimeError("MongoDB client is not initialized. Call init_client() on startup.")
    return _client[_db_name]


def collection(name: str) -> AsyncCollection:
    return database()[name]


async def ensure_indexes() -> None:
    """
    Create the indexes route queries rely on. Safe to call on every startup.
    """
    await collection(SONGS).create_index([("artist_genre", ASCENDING)])


def document_to_dict(document: dict[str, Any]) -> dict[str, Any]:
    """
    Make a raw document JSON-friendly: ObjectId `_id` becomes a string.
    """
    out = dict(document)
    if "_id" in out:
        out["_id"] = str(out["_id"])
    return out
