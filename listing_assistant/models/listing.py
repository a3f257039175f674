"""
Listing draft - the field payload a seller submits while authoring a listing.
"""
import math
from typing import Any, Optional

from pydantic import Field, field_validator

from .base import WireModel


def _parse_float(v: Any) -> Optional[float]:
    """
    Float from a number or form string. Integers past the float range
    saturate to infinity; other non-finite input is dropped.
    """
    if v is None or isinstance(v, bool):
        return None
    if isinstance(v, int):
        try:
            return float(v)
        except OverflowError:
            return math.inf if v > 0 else -math.inf
    if isinstance(v, float):
        return v if math.isfinite(v) else None
    if isinstance(v, str):
        cleaned = v.strip().replace(" ", "").replace("$", "")
        if not cleaned:
            return None
        try:
            value = float(cleaned)
        except ValueError:
            return None
        return value if math.isfinite(value) else None
    return None


class ListingDraft(WireModel):
    """
    Draft listing fields. Every field is optional; absence is scored or
    handled as missing by the components rather than rejected.
    """
    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    stock: Optional[int] = None
    category_id: Optional[str] = Field(default=None, alias="category_id")
    images: list[str] = Field(default_factory=list)
    existing_description: Optional[str] = None

    # Extras read by individual actions
    category: Optional[str] = None
    current_price: Optional[float] = None
    available_categories: list[str] = Field(default_factory=list)

    @field_validator("price", "current_price", mode="before")
    @classmethod
    def parse_price(cls, v: Any) -> Optional[float]:
        """Parse price from numbers or form strings like "12.50"."""
        return _parse_float(v)

    @field_validator("stock", mode="before")
    @classmethod
    def parse_stock(cls, v: Any) -> Optional[int]:
        """Parse stock, truncating fractional input ("3.7" -> 3)."""
        if isinstance(v, int) and not isinstance(v, bool):
            return v
        value = _parse_float(v)
        if value is None or not math.isfinite(value):
            return None
        return int(value)

    @field_validator("category_id", mode="before")
    @classmethod
    def stringify_category_id(cls, v: Any) -> Optional[str]:
        if v is None:
            return None
        return str(v)

    @field_validator("title", "description", "existing_description", "category", mode="before")
    @classmethod
    def stringify_text(cls, v: Any) -> Optional[str]:
        if v is None:
            return None
        return v if isinstance(v, str) else str(v)

    @field_validator("images", "available_categories", mode="before")
    @classmethod
    def clean_list(cls, v: Any) -> list[str]:
        if v is None:
            return []
        if isinstance(v, str):
            v = [v]
        if not isinstance(v, (list, tuple)):
            raise ValueError("must be a list of strings")
        return [str(item) for item in v if item is not None and str(item).strip()]

    @property
    def combined_text(self) -> str:
        """Title and description joined the way the analyzers read them."""
        return f"{self.title or ''} {self.description or ''}"
