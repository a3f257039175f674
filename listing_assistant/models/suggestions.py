"""
Suggestion models - results of the content and classification actions.

Each result carries demo_mode, set when heuristic output stood in for the
generative backend.
"""
from typing import Literal

from pydantic import Field

from .base import WireModel


Confidence = Literal["low", "medium", "high"]
SearchVolume = Literal["low", "medium", "high"]


class Suggestion(WireModel):
    """Base for results that may come from either the AI or the heuristics."""
    demo_mode: bool = Field(default=False, description="True when heuristic output was returned")


class CategoryRecommendation(Suggestion):
    recommended: str
    confidence: Confidence
    reasoning: str
    alternatives: list[str] = Field(default_factory=list)


class PricePoints(WireModel):
    budget: float
    standard: float
    premium: float


class PricingSuggestion(Suggestion):
    suggested_min: float
    suggested_max: float
    optimal: float
    reasoning: str
    price_points: PricePoints


class KeywordSet(Suggestion):
    primary: list[str] = Field(default_factory=list)
    secondary: list[str] = Field(default_factory=list)
    long_tail: list[str] = Field(default_factory=list)
    search_volume: SearchVolume


class DescriptionVariant(WireModel):
    style: str
    text: str
    description: str = Field(default="", description="Short label of the writing style")


class DescriptionSet(Suggestion):
    variants: list[DescriptionVariant] = Field(default_factory=list)


class TitleSuggestions(Suggestion):
    original: str
    suggestions: list[str] = Field(default_factory=list)
    analysis: str = ""


class FeatureList(Suggestion):
    features: list[str] = Field(default_factory=list)
