"""
Content templater - style variants for descriptions, titles and feature bullets.
"""
import logging
import math
from typing import Optional

from ..config import get_config
from ..errors import MissingFieldError
from ..models.listing import ListingDraft
from ..models.suggestions import (
    DescriptionSet,
    DescriptionVariant,
    FeatureList,
    TitleSuggestions,
)
from .text import TextAnalyzer, capitalize_words


logger = logging.getLogger(__name__)


DESCRIPTION_TEMPLATES = [
    (
        "professional",
        "Formal and detailed, emphasizing quality",
        "This premium {name} represents exceptional quality and outstanding value in the "
        "{category}. Engineered with meticulous attention to detail, it meets the highest "
        "industry standards for performance and reliability. Designed for discerning customers "
        "who refuse to compromise on excellence, this product delivers consistent results you "
        "can depend on. Every aspect has been carefully considered to ensure maximum "
        "satisfaction and long-lasting durability. Backed by our unwavering commitment to "
        "quality and customer service, this investment provides peace of mind and proven "
        "performance.",
    ),
    (
        "casual",
        "Friendly and conversational",
        "Looking for an awesome {name}? You just found it! This has become one of our absolute "
        "customer favorites, and honestly, we're not surprised. It's super practical, really "
        "well-made, and just works exactly like you'd want it to. At {price}, it's genuinely a "
        "fantastic deal. People keep coming back to tell us how happy they are with their "
        "purchase. Don't sleep on this one - grab yours while we still have them in stock!",
    ),
    (
        "marketing",
        "Persuasive with strong call-to-action",
        "Transform your experience with this incredible {name}! Why settle for ordinary when "
        "extraordinary is within reach? This isn't just another purchase - it's an investment "
        "in quality that pays dividends every single day. Join thousands of delighted customers "
        "who've already made the smart choice. With limited availability and growing demand, "
        "now is the perfect time to secure yours. Order today and discover the difference that "
        "true quality makes. Your satisfaction is guaranteed!",
    ),
]

TITLE_ANALYSIS = (
    "Optimized for clarity, SEO, and conversion. Added descriptive keywords and value "
    "propositions to improve search visibility and click-through rates."
)

BASE_FEATURES = [
    "Premium quality construction ensures lasting durability and reliability",
    "Easy to use right out of the box with intuitive design",
    "Versatile functionality suitable for multiple applications",
    "Exceptional value combining quality with competitive pricing",
    "Trusted by thousands of satisfied customers worldwide",
    "Backed by comprehensive warranty for complete peace of mind",
]


def format_price(price: Optional[float]) -> str:
    """Render "$30" for whole prices and "$29.99" otherwise."""
    if not price or not math.isfinite(price):
        return "competitively priced"
    if float(price).is_integer():
        return f"${int(price)}"
    return f"${price}"


class ContentTemplater:
    """Fills fixed copy templates with the draft's fields and top keywords."""

    def __init__(
        self,
        analyzer: Optional[TextAnalyzer] = None,
        max_title_suggestions: Optional[int] = None,
        max_features: Optional[int] = None,
    ):
        config = get_config().assistant
        self.analyzer = analyzer or TextAnalyzer()
        self.max_title_suggestions = max_title_suggestions or config.max_title_suggestions
        self.max_features = max_features or config.max_features

    def generate_descriptions(self, draft: ListingDraft) -> DescriptionSet:
        """Three description variants: professional, casual and marketing."""
        values = {
            "name": draft.title or "product",
            "price": format_price(draft.price),
            "category": draft.category or "marketplace",
        }
        variants = [
            DescriptionVariant(style=style, description=label, text=template.format(**values))
            for style, label, template in DESCRIPTION_TEMPLATES
        ]
        return DescriptionSet(variants=variants)

    def optimize_title(self, draft: ListingDraft) -> TitleSuggestions:
        """
        SEO title variants for the draft title.

        A missing title is a request error (HTTP 400), not a 200 result
        carrying an error field.

        Raises:
            MissingFieldError: If the draft has no title
        """
        title = draft.title
        if not title:
            raise MissingFieldError("Title is required")

        keywords = self.analyzer.extract_keywords(draft.description)[:3] if draft.description else []
        category_prefix = f"{draft.category} - " if draft.category else ""

        candidates = [
            f"Premium {title} - High Quality & Durable",
            f"{category_prefix}{title} | Professional Grade",
            f"Best {title} - Top Rated & Trusted",
        ]
        if keywords:
            candidates.append(f"{title} - {capitalize_words(' & '.join(keywords[:2]))}")

        return TitleSuggestions(
            original=title,
            suggestions=candidates[: self.max_title_suggestions],
            analysis=TITLE_ANALYSIS,
        )

    def generate_features(self, draft: ListingDraft) -> FeatureList:
        """
        Feature bullets. The top two description keywords become a leading
        and a trailing bullet; fixed bullets are dropped to fit the cap.
        """
        keywords = self.analyzer.extract_keywords(draft.description)[:6] if draft.description else []

        leading = []
        trailing = []
        if keywords:
            leading.append(f"{capitalize_words(keywords[0])} technology for superior performance")
        if len(keywords) > 1:
            trailing.append(f"Advanced {keywords[1]} design for optimal results")

        # Base bullets give way so the trailing keyword bullet survives the cap.
        room = max(0, self.max_features - len(leading) - len(trailing))
        features = leading + BASE_FEATURES[:room] + trailing
        return FeatureList(features=features[: self.max_features])
