"""
Tests for action dispatch.
"""
import pytest

from listing_assistant.ai.assistant import GenerativeAssistant
from listing_assistant.engine.completeness import CompletenessScorer
from listing_assistant.errors import InvalidActionError, InvalidRequestError, MissingFieldError
from listing_assistant.models.requests import Action
from listing_assistant.service import AssistantService


@pytest.fixture
def service(demo_llm) -> AssistantService:
    return AssistantService(
        scorer=CompletenessScorer(max_recommendations=3),
        assistant=GenerativeAssistant(llm_client=demo_llm),
    )


class TestDispatch:
    """Tests for AssistantService.handle."""

    def test_every_action_has_a_handler(self, service):
        assert set(service.handlers) == set(Action)

    @pytest.mark.parametrize("payload", [
        {"action": "delete_listing", "data": {}},
        {"data": {"title": "Lamp"}},
        {"action": None},
        {"action": 3},
        [],
        None,
        "score_completeness",
    ])
    def test_invalid_action(self, service, payload):
        with pytest.raises(InvalidActionError, match="Invalid action"):
            service.handle(payload)

    def test_score_completeness(self, service, complete_draft_data):
        result = service.handle({"action": "score_completeness", "data": complete_draft_data})

        assert result["score"] == 100
        assert result["qualityLevel"] == "excellent"
        assert result["maxScore"] == 100
        assert result["feedback"][0] == {
            "category": "Title",
            "score": 15,
            "maxScore": 15,
            "status": "complete",
            "message": "Excellent title length",
        }
        assert "demoMode" not in result

    @pytest.mark.parametrize("data", [None, {}])
    def test_missing_data_is_empty_draft(self, service, data):
        result = service.handle({"action": "score_completeness", "data": data})

        assert result["score"] == 0
        assert result["qualityLevel"] == "poor"

    @pytest.mark.parametrize("data", [{"images": 5}, "not an object", {"availableCategories": {"a": 1}}])
    def test_invalid_data(self, service, data):
        with pytest.raises(InvalidRequestError):
            service.handle({"action": "score_completeness", "data": data})

    @pytest.mark.parametrize("action", [a.value for a in Action if a is not Action.SCORE_COMPLETENESS])
    def test_generative_actions_tagged_demo(self, service, action):
        """Without credentials every generative action reports demo mode."""
        result = service.handle({"action": action, "data": {"title": "Camping Tent", "description": "Two person tent"}})

        assert result["demoMode"] is True

    def test_pricing_wire_shape(self, service):
        result = service.handle({
            "action": "analyze_pricing",
            "data": {"currentPrice": "100", "category": "Electronics", "description": "x" * 240},
        })

        assert result["optimal"] == 180.0
        assert result["suggestedMin"] == 135.0
        assert result["suggestedMax"] == 243.0
        assert set(result["pricePoints"]) == {"budget", "standard", "premium"}

    @pytest.mark.parametrize("data", [{"price": 10**400}, {"stock": 10**400}])
    def test_huge_integers_are_scored(self, service, data):
        result = service.handle({"action": "score_completeness", "data": data})

        assert result["score"] == 10

    def test_very_large_price_band(self, service):
        result = service.handle({
            "action": "analyze_pricing",
            "data": {"currentPrice": 1e306, "category": "Electronics", "description": "x" * 240},
        })

        assert result["suggestedMin"] < result["optimal"] < result["suggestedMax"]

    def test_keyword_wire_shape(self, service):
        result = service.handle({"action": "extract_keywords", "data": {"title": "Garden hose reel"}})

        assert set(result) == {"primary", "secondary", "longTail", "searchVolume", "demoMode"}

    def test_handler_errors_propagate(self, service):
        with pytest.raises(MissingFieldError):
            service.handle({"action": "optimize_title", "data": {}})

    def test_idempotent(self, service, complete_draft_data):
        payload = {"action": "generate_features", "data": complete_draft_data}

        assert service.handle(payload) == service.handle(payload)
