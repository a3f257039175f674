"""Heuristic components of the listing assistant."""

from .text import TextAnalyzer, KeywordExtractor
from .classifier import CategoryClassifier
from .pricing import PricingHeuristic
from .templates import ContentTemplater
from .completeness import CompletenessScorer

__all__ = [
    "TextAnalyzer",
    "KeywordExtractor",
    "CategoryClassifier",
    "PricingHeuristic",
    "ContentTemplater",
    "CompletenessScorer",
]
