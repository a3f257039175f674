"""
Category classifier - keyword-hit scoring against the category lexicon.
"""
import logging
from typing import Optional

from ..lexicon import Lexicon, get_lexicon
from ..models.suggestions import CategoryRecommendation


logger = logging.getLogger(__name__)

FALLBACK_CATEGORY = "General"


class CategoryClassifier:
    """
    Ranks lexicon categories by how many of their keywords occur in the
    listing text. Each keyword counts once, however often it appears.
    """

    def __init__(self, lexicon: Optional[Lexicon] = None):
        self.lexicon = lexicon or get_lexicon()

    def score_categories(self, text: str) -> list[tuple[str, int]]:
        """Keyword hit counts per category, in lexicon order."""
        text = (text or "").lower()
        return [
            (entry.name, sum(1 for keyword in entry.keywords if keyword in text))
            for entry in self.lexicon.categories
        ]

    def recommend(
        self,
        title: Optional[str],
        description: Optional[str],
        available_categories: Optional[list[str]] = None,
    ) -> CategoryRecommendation:
        """
        Recommend a category for the listing.

        Args:
            title: Listing title
            description: Listing description
            available_categories: Caller's category list, used when nothing matches

        Returns:
            CategoryRecommendation with up to two alternatives
        """
        scores = self.score_categories(f"{title or ''} {description or ''}")

        best_match = ""
        max_score = 0
        for name, score in scores:
            # Strict comparison keeps the first category on ties
            if score > max_score:
                max_score = score
                best_match = name

        if not best_match and available_categories:
            best_match = available_categories[0]
        recommended = best_match or FALLBACK_CATEGORY

        ranked = sorted(
            (item for item in scores if item[0] != recommended),
            key=lambda item: item[1],
            reverse=True,
        )
        alternatives = [name for name, _ in ranked[:2]]

        logger.debug(
            f"Category scores: {dict(scores)}",
            extra={"recommended": recommended, "hits": max_score},
        )

        return CategoryRecommendation(
            recommended=recommended,
            confidence=self._confidence(max_score),
            reasoning=(
                "Based on keyword analysis of your title and description, this category "
                "best matches your product characteristics. "
                f"Found {max_score} relevant indicators."
            ),
            alternatives=alternatives,
        )

    @staticmethod
    def _confidence(hits: int) -> str:
        if hits > 3:
            return "high"
        if hits > 1:
            return "medium"
        return "low"
