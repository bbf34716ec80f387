"""
Kebab menu schemas (request/response models).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class KebabCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=200)
    ingredients: list[str]
    price: float
    is_vegetarian: bool = Field(default=False, alias="isVegetarian")

    def to_document(self) -> dict:
        # Stored field names match the public JSON (camelCase flag).
        return self.model_dump(by_alias=True)
