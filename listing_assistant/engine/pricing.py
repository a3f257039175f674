"""
Pricing heuristic - suggested price band from category and description quality.
"""
import logging
import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Optional

from ..config import get_config
from ..lexicon import Lexicon, get_lexicon
from ..models.suggestions import PricePoints, PricingSuggestion


logger = logging.getLogger(__name__)


# Ratios applied to the adjusted base price
MIN_RATIO = 0.75
MAX_RATIO = 1.35
BUDGET_RATIO = 0.80
PREMIUM_RATIO = 1.30

# Description length that earns a neutral quality factor, and the factor cap
REFERENCE_DESCRIPTION_LENGTH = 200
MAX_QUALITY_FACTOR = 1.2


CENT = Decimal("0.01")

# Enough digits to quantize any finite float to cents
_CENTS_CONTEXT = Context(prec=400)


def round_cents(value: float) -> float:
    """Round half up to two decimals, on the shortest decimal form of value."""
    return float(Decimal(repr(value)).quantize(CENT, rounding=ROUND_HALF_UP, context=_CENTS_CONTEXT))


class PricingHeuristic:
    """
    Deterministic price band:
    base * category multiplier * description quality factor.
    """

    def __init__(
        self,
        lexicon: Optional[Lexicon] = None,
        default_base_price: Optional[float] = None,
    ):
        self.lexicon = lexicon or get_lexicon()
        if default_base_price is None:
            default_base_price = get_config().assistant.default_base_price
        self.default_base_price = default_base_price

    def quality_factor(self, description: Optional[str]) -> float:
        """Longer descriptions support higher prices, up to the cap."""
        if not description:
            return 1.0
        return min(len(description) / REFERENCE_DESCRIPTION_LENGTH, MAX_QUALITY_FACTOR)

    def analyze(
        self,
        title: Optional[str],
        description: Optional[str],
        current_price: Optional[float],
        category: Optional[str],
    ) -> PricingSuggestion:
        """
        Suggest a price band for a listing.

        Args:
            title: Listing title (not used by the heuristic, kept for the AI path)
            description: Listing description
            current_price: Seller's price; non-positive values count as unset
            category: Category name looked up in the multiplier table

        Returns:
            PricingSuggestion rounded to cents
        """
        if current_price is not None and current_price > 0:
            base = current_price
        else:
            base = self.default_base_price

        multiplier = self.lexicon.multiplier_for(category)
        final_base = base * multiplier * self.quality_factor(description)
        if not math.isfinite(final_base * MAX_RATIO):
            logger.warning(
                "Price band out of range, using default base price",
                extra={"current_price": current_price, "category": category},
            )
            base = self.default_base_price
            final_base = base * multiplier * self.quality_factor(description)

        logger.debug(
            "Pricing base computed",
            extra={"base": base, "multiplier": multiplier, "final_base": final_base},
        )

        return PricingSuggestion(
            suggested_min=round_cents(final_base * MIN_RATIO),
            suggested_max=round_cents(final_base * MAX_RATIO),
            optimal=round_cents(final_base),
            reasoning=(
                f"Pricing analysis based on {category or 'general'} category market standards, "
                "product description quality, and competitive positioning. "
                "This range balances profitability with market competitiveness."
            ),
            price_points=PricePoints(
                budget=round_cents(final_base * BUDGET_RATIO),
                standard=round_cents(final_base),
                premium=round_cents(final_base * PREMIUM_RATIO),
            ),
        )
