"""
Pydantic schemas for song documents.
"""

from __future__ import annotations

from typing import Annotated, Union

from pydantic import BaseModel, Field

# Finite and >= 0; ints stay ints, NaN/inf are rejected.
Duration = Union[
    Annotated[int, Field(ge=0)],
    Annotated[float, Field(ge=0, allow_inf_nan=False)],
]


class SongDocument(BaseModel):
    """
    Shape of a persisted song. Validated right before insert.
    """

    track_name: str = Field(..., min_length=1)
    artist_name: str = Field(..., min_length=1)
    track_duration_ms: Duration | None = None
    track_id: str | None = None
    embed: str = ""
    artist_genre: str = Field(..., min_length=1)
