"""
Lexicon data - stop words, category keywords and price multipliers.

The tables live in a JSON file so they can be tuned without touching code.
They are read once per path and shared read-only between requests.
"""
import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from .config import get_config
from .errors import LexiconError


logger = logging.getLogger(__name__)


class CategoryEntry(BaseModel):
    """One category of the keyword-to-category table."""
    name: str
    keywords: list[str] = Field(default_factory=list)
    price_multiplier: float = Field(default=1.0, gt=0)

    @field_validator("keywords")
    @classmethod
    def lowercase_keywords(cls, v: list[str]) -> list[str]:
        return [k.lower() for k in v if k.strip()]


class Lexicon(BaseModel):
    """
    Ordered category table plus stop words.
    Category order decides ties, so it is kept exactly as declared.
    """
    stop_words: frozenset[str] = Field(default_factory=frozenset)
    categories: list[CategoryEntry] = Field(default_factory=list)

    @field_validator("stop_words", mode="before")
    @classmethod
    def lowercase_stop_words(cls, v):
        return frozenset(str(w).lower() for w in (v or []))

    @field_validator("categories")
    @classmethod
    def unique_names(cls, v: list[CategoryEntry]) -> list[CategoryEntry]:
        names = [c.name for c in v]
        duplicates = {n for n in names if names.count(n) > 1}
        if duplicates:
            raise ValueError(f"Duplicate categories: {sorted(duplicates)}")
        return v

    def multiplier_for(self, category: Optional[str]) -> float:
        """Price multiplier for a category name, 1.0 when unknown."""
        for entry in self.categories:
            if entry.name == category:
                return entry.price_multiplier
        return 1.0


def load_lexicon(path: Path) -> Lexicon:
    """Read and validate a lexicon file."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise LexiconError(f"Could not read lexicon {path}: {e}") from e

    try:
        lexicon = Lexicon.model_validate(data)
    except ValidationError as e:
        raise LexiconError(f"Invalid lexicon {path}: {e}") from e

    logger.info(
        f"Loaded lexicon with {len(lexicon.categories)} categories",
        extra={"path": str(path), "stop_words": len(lexicon.stop_words)},
    )
    return lexicon


class LexiconCache:
    """
    Process-lifetime cache of loaded lexicons, keyed by resolved file path.
    Entries live until clear() is called.
    """

    def __init__(self):
        self._entries: dict[Path, Lexicon] = {}

    def get(self, path: Optional[Path] = None) -> Lexicon:
        """Return the lexicon for path (configured default when None), loading it once."""
        if path is None:
            path = get_config().assistant.lexicon_path
        key = Path(path).resolve()
        lexicon = self._entries.get(key)
        if lexicon is None:
            lexicon = load_lexicon(key)
            self._entries[key] = lexicon
        return lexicon

    def clear(self) -> None:
        self._entries.clear()


_cache = LexiconCache()


def get_lexicon(path: Optional[Path] = None) -> Lexicon:
    """Shortcut for the shared cache."""
    return _cache.get(path)


def clear_cache() -> None:
    _cache.clear()
