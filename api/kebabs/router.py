"""
Kebab menu API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from . import repository, schemas

router = APIRouter()


@router.get("/get-kebabs")
async def get_kebabs() -> dict:
    kebabs = await repository.list_kebabs()
    return {"kebabs": kebabs, "count": len(kebabs)}


@router.post("/add-kebab", status_code=status.HTTP_201_CREATED)
async def add_kebab(request: schemas.KebabCreate) -> dict:
    return await repository.insert_kebab(request.to_document())
