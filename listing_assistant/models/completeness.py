"""
Completeness models - per-field feedback and the aggregated quality result.
"""
from enum import Enum
from typing import Literal

from pydantic import Field, model_validator

from .base import WireModel


class FeedbackCategory(str, Enum):
    """Scored listing fields, in the order they are reported."""
    TITLE = "Title"
    DESCRIPTION = "Description"
    IMAGES = "Images"
    CATEGORY = "Category"
    PRICE = "Price"
    STOCK = "Stock"
    KEYWORDS = "Keywords"


# Points available per field; sums to 100
MAX_SCORES: dict[FeedbackCategory, int] = {
    FeedbackCategory.TITLE: 15,
    FeedbackCategory.DESCRIPTION: 25,
    FeedbackCategory.IMAGES: 20,
    FeedbackCategory.CATEGORY: 10,
    FeedbackCategory.PRICE: 10,
    FeedbackCategory.STOCK: 10,
    FeedbackCategory.KEYWORDS: 10,
}

QualityLevel = Literal["poor", "fair", "good", "excellent"]
FeedbackStatus = Literal["complete", "partial", "missing"]


class FeedbackItem(WireModel):
    """Score and advice for one listing field."""
    category: FeedbackCategory
    score: int = Field(ge=0)
    max_score: int = Field(gt=0)
    status: FeedbackStatus
    message: str

    @model_validator(mode="after")
    def check_bounds(self) -> "FeedbackItem":
        if self.score > self.max_score:
            raise ValueError(f"{self.category.value} score {self.score} exceeds {self.max_score}")
        return self

    @property
    def deficit(self) -> int:
        """Points still available for this field."""
        return self.max_score - self.score


class CompletenessResult(WireModel):
    """Aggregated completeness score for a listing draft."""
    score: int = Field(ge=0, le=100)
    max_score: int = Field(default=100)
    percentage: int = Field(ge=0, le=100)
    quality_level: QualityLevel
    quality_message: str
    feedback: list[FeedbackItem]
    recommendations: list[str] = Field(default_factory=list)
