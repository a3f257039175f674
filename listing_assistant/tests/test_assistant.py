"""
Tests for the generative assistant and its heuristic fallback.
"""
import json

import pytest

from listing_assistant.ai.assistant import GenerativeAssistant, with_fallback
from listing_assistant.ai.llm_client import GenerationResult
from listing_assistant.engine.classifier import CategoryClassifier
from listing_assistant.engine.pricing import PricingHeuristic
from listing_assistant.engine.templates import ContentTemplater
from listing_assistant.engine.text import KeywordExtractor, TextAnalyzer
from listing_assistant.errors import AIResponseParseError, MissingFieldError
from listing_assistant.models.listing import ListingDraft
from listing_assistant.models.suggestions import FeatureList


ACTIONS = [
    "generate_description",
    "optimize_title",
    "recommend_category",
    "analyze_pricing",
    "extract_keywords",
    "generate_features",
]


@pytest.fixture
def draft() -> ListingDraft:
    return ListingDraft(
        title="Wireless Bluetooth Headphones",
        description="Noise cancelling headphones with long battery life and a fast charger.",
        price=79.0,
        category="Electronics",
        current_price=79.0,
    )


@pytest.fixture
def make_assistant(lexicon):
    def factory(llm, enabled=True) -> GenerativeAssistant:
        analyzer = TextAnalyzer(lexicon)
        return GenerativeAssistant(
            llm_client=llm,
            templater=ContentTemplater(analyzer, max_title_suggestions=3, max_features=7),
            classifier=CategoryClassifier(lexicon),
            pricing=PricingHeuristic(lexicon, default_base_price=29.99),
            keywords=KeywordExtractor(analyzer),
            enabled=enabled,
        )
    return factory


def _heuristic(assistant: GenerativeAssistant, action: str, draft: ListingDraft):
    """Direct heuristic output for an action."""
    return {
        "generate_description": lambda: assistant.templater.generate_descriptions(draft),
        "optimize_title": lambda: assistant.templater.optimize_title(draft),
        "recommend_category": lambda: assistant.classifier.recommend(
            draft.title, draft.description, draft.available_categories
        ),
        "analyze_pricing": lambda: assistant.pricing.analyze(
            draft.title, draft.description, draft.current_price, draft.category
        ),
        "extract_keywords": lambda: assistant.keywords.extract(draft),
        "generate_features": lambda: assistant.templater.generate_features(draft),
    }[action]()


class TestWithFallback:
    """Tests for the with_fallback wrapper."""

    def test_demo_mode_uses_heuristic(self):
        result = with_fallback(
            lambda: GenerationResult(success=False, demo_mode=True),
            lambda content: pytest.fail("parse must not run"),
            lambda: FeatureList(features=["fixed"]),
        )

        assert result.features == ["fixed"]
        assert result.demo_mode is True

    def test_failure_uses_heuristic(self):
        result = with_fallback(
            lambda: GenerationResult(success=False, error="503 Service Unavailable"),
            lambda content: pytest.fail("parse must not run"),
            lambda: FeatureList(features=["fixed"]),
        )

        assert result.demo_mode is True

    def test_success_uses_generated_content(self):
        result = with_fallback(
            lambda: GenerationResult(success=True, content="ignored"),
            lambda content: FeatureList(features=["generated"], demo_mode=True),
            lambda: pytest.fail("heuristic must not run"),
        )

        assert result.features == ["generated"]
        assert result.demo_mode is False


class TestGenerativeAssistant:
    """Tests for GenerativeAssistant."""

    @pytest.mark.parametrize("action", ACTIONS)
    def test_demo_mode_matches_heuristic(self, make_assistant, demo_llm, draft, action):
        """Without credentials each action returns the heuristic output, tagged."""
        assistant = make_assistant(demo_llm)
        result = getattr(assistant, action)(draft)
        expected = _heuristic(assistant, action, draft)

        assert result.demo_mode is True
        assert result.model_dump(exclude={"demo_mode"}) == expected.model_dump(exclude={"demo_mode"})

    @pytest.mark.parametrize("action", ACTIONS)
    def test_backend_error_falls_back(self, make_assistant, stub_llm, draft, action):
        llm = stub_llm(GenerationResult(success=False, error="Connection error."))
        result = getattr(make_assistant(llm), action)(draft)

        assert result.demo_mode is True
        assert len(llm.calls) == 1

    @pytest.mark.parametrize("action", ACTIONS)
    def test_unparseable_response(self, make_assistant, stub_llm, draft, action):
        llm = stub_llm(GenerationResult(success=True, content="Sure! Here you go."))

        with pytest.raises(AIResponseParseError, match="Failed to parse AI response"):
            getattr(make_assistant(llm), action)(draft)

    def test_generated_category(self, make_assistant, stub_llm, draft):
        content = json.dumps({
            "recommended": "Audio",
            "confidence": "medium",
            "reasoning": "Headphones are audio gear.",
            "alternatives": ["Electronics", "Music", "Gadgets"],
        })
        result = make_assistant(stub_llm(GenerationResult(success=True, content=content))).recommend_category(draft)

        assert result.recommended == "Audio"
        assert result.alternatives == ["Electronics", "Music"]
        assert result.demo_mode is False

    def test_generated_keywords_trimmed(self, make_assistant, stub_llm, draft):
        content = json.dumps({
            "primary": [f"p{i}" for i in range(8)],
            "secondary": [f"s{i}" for i in range(9)],
            "longTail": [f"l{i}" for i in range(6)],
            "searchVolume": "high",
        })
        result = make_assistant(stub_llm(GenerationResult(success=True, content=content))).extract_keywords(draft)

        assert len(result.primary) == 5
        assert len(result.secondary) == 7
        assert len(result.long_tail) == 5

    def test_prompt_contains_listing(self, make_assistant, stub_llm, draft):
        llm = stub_llm(GenerationResult(success=True, content='{"features": ["Long battery"]}'))
        result = make_assistant(llm).generate_features(draft)
        prompt, system_prompt = llm.calls[0]

        assert result.features == ["Long battery"]
        assert "Wireless Bluetooth Headphones" in prompt
        assert "features" in prompt
        assert "JSON" in system_prompt

    def test_disabled_skips_backend(self, make_assistant, stub_llm, draft):
        llm = stub_llm(GenerationResult(success=True, content='{"features": ["x"]}'))
        result = make_assistant(llm, enabled=False).generate_features(draft)

        assert llm.calls == []
        assert result.demo_mode is True

    def test_title_required_before_backend(self, make_assistant, stub_llm):
        llm = stub_llm(GenerationResult(success=True, content="{}"))

        with pytest.raises(MissingFieldError, match="Title is required"):
            make_assistant(llm).optimize_title(ListingDraft(description="no title"))
        assert llm.calls == []

    def test_ai_available(self, make_assistant, stub_llm, demo_llm):
        assert make_assistant(stub_llm()).ai_available is True
        assert make_assistant(stub_llm(), enabled=False).ai_available is False
        assert make_assistant(demo_llm).ai_available is False
