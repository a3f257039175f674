"""
Text analyzer - tokenization, stop-word removal and term frequency.
"""
import logging
import re
from collections import Counter
from typing import Optional

from ..lexicon import Lexicon, get_lexicon
from ..models.listing import ListingDraft
from ..models.suggestions import KeywordSet


logger = logging.getLogger(__name__)

_NON_ALNUM = re.compile(r"[^a-z0-9\s]")
_WORD_START = re.compile(r"\b\w")

MIN_TERM_LENGTH = 4


def capitalize_words(text: str) -> str:
    """Uppercase the first letter of every word."""
    return _WORD_START.sub(lambda m: m.group(0).upper(), text)


class TextAnalyzer:
    """Frequency-ranked keyword extraction over free text."""

    def __init__(self, lexicon: Optional[Lexicon] = None):
        self.lexicon = lexicon or get_lexicon()

    def tokenize(self, text: str) -> list[str]:
        """Lowercase, drop punctuation, keep terms longer than 3 chars that are not stop words."""
        cleaned = _NON_ALNUM.sub(" ", (text or "").lower())
        return [
            word for word in cleaned.split()
            if len(word) >= MIN_TERM_LENGTH and word not in self.lexicon.stop_words
        ]

    def extract_keywords(self, text: str) -> list[str]:
        """
        Distinct terms ordered by descending frequency.
        Equal counts keep first-seen order.
        """
        counts = Counter(self.tokenize(text))
        # Counter keeps insertion order and sorted() is stable
        return sorted(counts, key=lambda word: counts[word], reverse=True)


class KeywordExtractor:
    """Builds the SEO keyword set for a draft."""

    PRIMARY_COUNT = 5
    SECONDARY_COUNT = 7

    def __init__(self, analyzer: Optional[TextAnalyzer] = None):
        self.analyzer = analyzer or TextAnalyzer()

    def extract(self, draft: ListingDraft) -> KeywordSet:
        keywords = self.analyzer.extract_keywords(draft.combined_text)

        primary = keywords[: self.PRIMARY_COUNT]
        secondary = keywords[self.PRIMARY_COUNT : self.PRIMARY_COUNT + self.SECONDARY_COUNT]

        return KeywordSet(
            primary=primary,
            secondary=secondary,
            long_tail=self._long_tail(draft.title),
            search_volume=self._search_volume(len(keywords)),
        )

    def _long_tail(self, title: Optional[str]) -> list[str]:
        """Phrase templates seeded from the first two long title words."""
        words = [w for w in title.lower().split() if len(w) >= MIN_TERM_LENGTH] if title else []
        first = words[0] if words else None
        second = words[1] if len(words) > 1 else None
        name = title or "product"

        return [
            f"best {first or 'product'}",
            f"buy {name} online",
            f"{first or 'quality'} {second or 'product'} for sale",
            f"premium {name} deals",
            f"top rated {first or 'product'}",
        ]

    @staticmethod
    def _search_volume(distinct_terms: int) -> str:
        if distinct_terms > 15:
            return "high"
        if distinct_terms > 8:
            return "medium"
        return "low"
