"""
Completeness scorer - fixed point rubric over seven listing fields.
"""
import logging
from typing import Optional

from ..config import get_config
from ..models.completeness import (
    MAX_SCORES,
    CompletenessResult,
    FeedbackCategory,
    FeedbackItem,
)
from ..models.listing import ListingDraft


logger = logging.getLogger(__name__)


# Rubric targets
TITLE_MIN_LENGTH = 20
TITLE_MAX_LENGTH = 80
TITLE_REFERENCE_LENGTH = 50
DESCRIPTION_MIN_WORDS = 50
DESCRIPTION_MIN_LENGTH = 200
IMAGE_TARGET = 4
POINTS_PER_IMAGE = 5
KEYWORD_TEXT_LENGTH = 100

# (minimum score, level, message), checked top-down
QUALITY_TIERS = [
    (90, "excellent", "Excellent listing! Ready to publish."),
    (75, "good", "Good listing. A few improvements would make it great."),
    (50, "fair", "Fair listing. Add more details to attract buyers."),
    (0, "poor", "Needs work. Complete missing fields for better results."),
]


def quality_tier(score: int) -> tuple[str, str]:
    """Quality level and message for a total score."""
    for threshold, level, message in QUALITY_TIERS:
        if score >= threshold:
            return level, message
    return QUALITY_TIERS[-1][1], QUALITY_TIERS[-1][2]


def _item(category: FeedbackCategory, score: int, status: str, message: str) -> FeedbackItem:
    return FeedbackItem(
        category=category,
        score=score,
        max_score=MAX_SCORES[category],
        status=status,
        message=message,
    )


class CompletenessScorer:
    """
    Scores a draft against the completeness rubric.
    Total function: missing or poor fields score low, they never raise.
    """

    def __init__(self, max_recommendations: Optional[int] = None):
        if max_recommendations is None:
            max_recommendations = get_config().assistant.max_recommendations
        self.max_recommendations = max_recommendations

    def score(self, draft: ListingDraft) -> CompletenessResult:
        """
        Score all fields and aggregate.

        Args:
            draft: Listing draft to evaluate

        Returns:
            CompletenessResult with per-field feedback and top recommendations
        """
        feedback = [
            self._score_title(draft.title),
            self._score_description(draft.description),
            self._score_images(draft.images),
            self._score_category(draft.category_id),
            self._score_price(draft.price),
            self._score_stock(draft.stock),
            self._score_keywords(draft.title, draft.description),
        ]

        total = sum(item.score for item in feedback)
        level, message = quality_tier(total)

        return CompletenessResult(
            score=total,
            percentage=total,
            quality_level=level,
            quality_message=message,
            feedback=feedback,
            recommendations=self._recommendations(feedback),
        )

    def _recommendations(self, feedback: list[FeedbackItem]) -> list[str]:
        """Messages for incomplete fields, largest point deficit first."""
        incomplete = [item for item in feedback if item.status != "complete"]
        # sorted() is stable, so equal deficits keep rubric order
        incomplete = sorted(incomplete, key=lambda item: item.deficit, reverse=True)
        return [item.message for item in incomplete[: self.max_recommendations]]

    def _score_title(self, title: Optional[str]) -> FeedbackItem:
        length = len(title.strip()) if title else 0

        if TITLE_MIN_LENGTH <= length <= TITLE_MAX_LENGTH:
            return _item(FeedbackCategory.TITLE, 15, "complete", "Excellent title length")

        if length > 0:
            score = min(15, int(length / TITLE_REFERENCE_LENGTH * 15))
            if length < TITLE_MIN_LENGTH:
                message = "Title is too short. Aim for 20-80 characters."
            else:
                message = "Title is too long. Keep it under 80 characters."
            return _item(FeedbackCategory.TITLE, score, "partial", message)

        return _item(
            FeedbackCategory.TITLE, 0, "missing",
            "Add a descriptive title (20-80 characters)",
        )

    def _score_description(self, description: Optional[str]) -> FeedbackItem:
        text = description.strip() if description else ""
        length = len(text)
        word_count = len(text.split())

        if word_count >= DESCRIPTION_MIN_WORDS and length >= DESCRIPTION_MIN_LENGTH:
            return _item(FeedbackCategory.DESCRIPTION, 25, "complete", "Comprehensive description")

        if length > 0:
            score = min(25, int(word_count / DESCRIPTION_MIN_WORDS * 25))
            if word_count < DESCRIPTION_MIN_WORDS:
                message = (
                    f"Add {DESCRIPTION_MIN_WORDS - word_count} more words for better detail "
                    f"({word_count}/{DESCRIPTION_MIN_WORDS} words)"
                )
            else:
                message = f"Add more detail ({length}/{DESCRIPTION_MIN_LENGTH} characters)"
            return _item(FeedbackCategory.DESCRIPTION, score, "partial", message)

        return _item(
            FeedbackCategory.DESCRIPTION, 0, "missing",
            "Add a detailed description (at least 50 words)",
        )

    def _score_images(self, images: list[str]) -> FeedbackItem:
        count = len(images)

        if count >= IMAGE_TARGET:
            return _item(FeedbackCategory.IMAGES, 20, "complete", f"Great! {count} images added")

        if count > 0:
            return _item(
                FeedbackCategory.IMAGES,
                min(20, count * POINTS_PER_IMAGE),
                "partial",
                f"Add {IMAGE_TARGET - count} more images ({count}/{IMAGE_TARGET})",
            )

        return _item(FeedbackCategory.IMAGES, 0, "missing", "Add at least 4 product images")

    def _score_category(self, category_id: Optional[str]) -> FeedbackItem:
        if category_id and category_id.strip():
            return _item(FeedbackCategory.CATEGORY, 10, "complete", "Category selected")
        return _item(
            FeedbackCategory.CATEGORY, 0, "missing",
            "Select a category for better discoverability",
        )

    def _score_price(self, price: Optional[float]) -> FeedbackItem:
        if price is not None and price > 0:
            return _item(FeedbackCategory.PRICE, 10, "complete", "Price set")
        return _item(FeedbackCategory.PRICE, 0, "missing", "Set a competitive price")

    def _score_stock(self, stock: Optional[int]) -> FeedbackItem:
        if stock is not None and stock >= 0:
            return _item(FeedbackCategory.STOCK, 10, "complete", "Stock quantity specified")
        return _item(FeedbackCategory.STOCK, 0, "missing", "Specify stock quantity")

    def _score_keywords(self, title: Optional[str], description: Optional[str]) -> FeedbackItem:
        if not (title and description):
            return _item(
                FeedbackCategory.KEYWORDS, 0, "missing",
                "Add keywords for better search visibility",
            )

        if len(f"{title} {description}") > KEYWORD_TEXT_LENGTH:
            return _item(FeedbackCategory.KEYWORDS, 10, "complete", "Good keyword coverage")
        return _item(FeedbackCategory.KEYWORDS, 5, "partial", "Add more descriptive keywords")
