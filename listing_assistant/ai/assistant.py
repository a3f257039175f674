"""
Generative assistant - AI suggestions with heuristic fallback.
"""
import json
import logging
from typing import Callable, Optional, Type, TypeVar

from ..config import get_config
from ..errors import MissingFieldError
from ..models.listing import ListingDraft
from ..models.suggestions import (
    CategoryRecommendation,
    DescriptionSet,
    FeatureList,
    KeywordSet,
    PricingSuggestion,
    Suggestion,
    TitleSuggestions,
)
from ..engine.classifier import CategoryClassifier
from ..engine.pricing import PricingHeuristic
from ..engine.templates import ContentTemplater
from ..engine.text import KeywordExtractor
from .llm_client import GenerationResult, LLMClient, parse_json_content


logger = logging.getLogger(__name__)

S = TypeVar("S", bound=Suggestion)


SYSTEM_PROMPT = """You are an expert e-commerce copywriter and marketplace analyst.
You help sellers write listings that are accurate, clear and easy to find in search.
Never invent specifications that are not in the seller's text.
Respond with a single JSON object that matches the schema you are given. No explanations."""


USER_PROMPT_TEMPLATE = """{task}

Listing:
{listing}

Return JSON matching this schema:
{schema}"""


TASKS = {
    "description": (
        "Write three product descriptions in the styles professional, casual and marketing. "
        "Each variant has the style name, the text (80-150 words) and a short label of the style."
    ),
    "title": (
        "Suggest three optimized listing titles for search and conversion, 20-80 characters each. "
        "Set original to the seller's title and explain the changes in analysis."
    ),
    "category": (
        "Recommend the best category for this listing. Prefer the available categories when given. "
        "Give confidence as low, medium or high, a one-sentence reasoning and up to two alternatives."
    ),
    "pricing": (
        "Suggest a price range for this listing: suggestedMin, suggestedMax, optimal and the "
        "budget, standard and premium price points, in the listing's currency, rounded to cents."
    ),
    "keywords": (
        "Extract SEO keywords: up to 5 primary, up to 7 secondary, up to 5 long-tail search "
        "phrases, and an estimated searchVolume of low, medium or high."
    ),
    "features": "Write up to 7 concise feature bullets a buyer would care about.",
}


def with_fallback(
    generate: Callable[[], GenerationResult],
    parse: Callable[[str], S],
    heuristic: Callable[[], S],
) -> S:
    """
    Prefer generative output; fall back to the heuristic result tagged demo_mode.

    Raises:
        AIResponseParseError: If the backend answered but the content is unusable
    """
    result = generate()
    if result.demo_mode or not result.success:
        if not result.demo_mode:
            logger.warning(f"Falling back to heuristics: {result.error}")
        return heuristic().model_copy(update={"demo_mode": True})

    return parse(result.content).model_copy(update={"demo_mode": False})


def _listing_text(draft: ListingDraft) -> str:
    """Draft fields rendered for the prompt, skipping empty ones."""
    fields = draft.model_dump(by_alias=True, exclude_none=True, exclude_defaults=True, mode="json")
    return json.dumps(fields, indent=2, ensure_ascii=False)


class GenerativeAssistant:
    """
    One method per generative action. Each asks the LLM for structured output
    and returns the equivalent heuristic result when the LLM is unavailable.
    """

    def __init__(
        self,
        llm_client: Optional[LLMClient] = None,
        templater: Optional[ContentTemplater] = None,
        classifier: Optional[CategoryClassifier] = None,
        pricing: Optional[PricingHeuristic] = None,
        keywords: Optional[KeywordExtractor] = None,
        enabled: Optional[bool] = None,
    ):
        self.llm = llm_client or LLMClient()
        self.templater = templater or ContentTemplater()
        self.classifier = classifier or CategoryClassifier()
        self.pricing = pricing or PricingHeuristic()
        self.keywords = keywords or KeywordExtractor()
        self.enabled = get_config().assistant.enable_ai if enabled is None else enabled

    @property
    def ai_available(self) -> bool:
        return self.enabled and self.llm.is_available()

    def _run(
        self,
        task: str,
        draft: ListingDraft,
        response_model: Type[S],
        heuristic: Callable[[], S],
    ) -> S:
        def generate() -> GenerationResult:
            if not self.enabled:
                return GenerationResult(success=False, error="AI disabled", demo_mode=True)
            prompt = USER_PROMPT_TEMPLATE.format(
                task=TASKS[task],
                listing=_listing_text(draft),
                schema=json.dumps(response_model.model_json_schema(by_alias=True), indent=2),
            )
            return self.llm.generate(prompt, SYSTEM_PROMPT)

        def parse(content: str) -> S:
            return parse_json_content(content, response_model)

        result = with_fallback(generate, parse, heuristic)
        logger.info(f"Generated {task} suggestions", extra={"task": task, "demo_mode": result.demo_mode})
        return result

    def generate_description(self, draft: ListingDraft) -> DescriptionSet:
        return self._run(
            "description", draft, DescriptionSet,
            lambda: self.templater.generate_descriptions(draft),
        )

    def optimize_title(self, draft: ListingDraft) -> TitleSuggestions:
        """
        Title suggestions, capped. A missing title raises MissingFieldError
        before the backend is called, so the caller answers HTTP 400 rather
        than a 200 result with an error field.
        """
        if not draft.title:
            raise MissingFieldError("Title is required")
        result = self._run(
            "title", draft, TitleSuggestions,
            lambda: self.templater.optimize_title(draft),
        )
        return result.model_copy(update={
            "suggestions": result.suggestions[: self.templater.max_title_suggestions],
        })

    def recommend_category(self, draft: ListingDraft) -> CategoryRecommendation:
        result = self._run(
            "category", draft, CategoryRecommendation,
            lambda: self.classifier.recommend(
                draft.title, draft.description, draft.available_categories
            ),
        )
        return result.model_copy(update={"alternatives": result.alternatives[:2]})

    def analyze_pricing(self, draft: ListingDraft) -> PricingSuggestion:
        return self._run(
            "pricing", draft, PricingSuggestion,
            lambda: self.pricing.analyze(
                draft.title, draft.description, draft.current_price, draft.category
            ),
        )

    def extract_keywords(self, draft: ListingDraft) -> KeywordSet:
        result = self._run(
            "keywords", draft, KeywordSet,
            lambda: self.keywords.extract(draft),
        )
        return result.model_copy(update={
            "primary": result.primary[:5],
            "secondary": result.secondary[:7],
            "long_tail": result.long_tail[:5],
        })

    def generate_features(self, draft: ListingDraft) -> FeatureList:
        result = self._run(
            "features", draft, FeatureList,
            lambda: self.templater.generate_features(draft),
        )
        return result.model_copy(update={
            "features": result.features[: self.templater.max_features],
        })
