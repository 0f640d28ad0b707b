"""Shared Pydantic data models for the solar catalog.

These models define the product records the catalog hands to the
related-products selector. All modules import from here.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator


# === Enums ===

class MediaType(str, Enum):
    """Kind of media attached to a product."""
    IMAGE = "image"
    VIDEO = "video"


# === Catalog records ===

class MediaFile(BaseModel):
    """Uploaded image or video belonging to a product gallery."""
    model_config = ConfigDict(frozen=True)

    url: str
    type: MediaType = MediaType.IMAGE
    public_id: str = ""
    thumbnail_url: str | None = None
    order: int = 0
    width: int | None = None
    height: int | None = None
    format: str | None = None


class Product(BaseModel):
    """A catalog product.

    Only id, brand, category and specs matter to related-product selection;
    the remaining fields are carried through for display.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str
    brand: str
    category: str
    # StrictBool first so JSON true/false stay booleans instead of 1/0
    specs: dict[str, StrictBool | str | int | float] = Field(default_factory=dict)
    name: str = ""
    price: float = Field(default=0, ge=0, description="Price in NGN")
    image: str = ""
    gallery: list[str] = Field(default_factory=list)
    media: list[MediaFile] = Field(default_factory=list)
    description: str = ""
    featured: bool = False
    created_at: str | None = Field(default=None, alias="createdAt")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        # Database rows use integer ids, the JSON catalog uses strings
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("specs", mode="before")
    @classmethod
    def _drop_empty_specs(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, dict):
            return {k: v for k, v in value.items() if v is not None}
        return value

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
