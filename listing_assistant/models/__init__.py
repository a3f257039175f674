"""
Pydantic models for the listing assistant.
All request and response contracts are defined here.
"""

from .base import WireModel
from .listing import ListingDraft
from .completeness import (
    FeedbackCategory,
    FeedbackItem,
    CompletenessResult,
    MAX_SCORES,
)
from .suggestions import (
    CategoryRecommendation,
    PricePoints,
    PricingSuggestion,
    KeywordSet,
    DescriptionVariant,
    DescriptionSet,
    TitleSuggestions,
    FeatureList,
)
from .requests import Action, AssistantRequest, assistant_request_adapter

__all__ = [
    "WireModel",
    # Listing
    "ListingDraft",
    # Completeness
    "FeedbackCategory",
    "FeedbackItem",
    "CompletenessResult",
    "MAX_SCORES",
    # Suggestions
    "CategoryRecommendation",
    "PricePoints",
    "PricingSuggestion",
    "KeywordSet",
    "DescriptionVariant",
    "DescriptionSet",
    "TitleSuggestions",
    "FeatureList",
    # Requests
    "Action",
    "AssistantRequest",
    "assistant_request_adapter",
]
