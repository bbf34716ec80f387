"""
Song API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from . import repository
from .catalog import SongCatalog
from .dependencies import get_catalog

router = APIRouter()


@router.get("/get-random-song-by-genre")
async def get_random_song_by_genre(genre: str | None = Query(default=None)) -> dict:
    # Matched as given; stored genres are already trimmed.
    if not genre:
        raise HTTPException(status_code=400, detail="genre query param required")

    song = await repository.random_song_by_genre(genre)
    if song is None:
        raise HTTPException(status_code=404, detail=f"No songs found for genre: {genre}")
    return song


@router.get("/get-genres")
async def get_genres(catalog: SongCatalog = Depends(get_catalog)) -> dict:
    genres = await catalog.genres.get()
    return {"genres": genres, "count": len(genres)}
