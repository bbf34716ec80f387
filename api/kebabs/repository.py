"""
Kebab persistence.
"""

from __future__ import annotations

from typing import Any

from core import db


async def list_kebabs() -> list[dict[str, Any]]:
    cursor = db.collection(db.KEBABS).find({}).sort("_id", 1)
    rows = await cursor.to_list(length=None)
    return [db.document_to_dict(r) for r in rows]


async def insert_kebab(document: dict[str, Any]) -> dict[str, Any]:
    document = dict(document)
    result = await db.collection(db.KEBABS).insert_one(document)
    document["_id"] = result.inserted_id
    return db.document_to_dict(document)
