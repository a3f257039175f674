"""
Assistant service - validates a request and dispatches it to its action handler.
"""
import logging
from typing import Any, Callable, Optional

from pydantic import ValidationError

from .ai.assistant import GenerativeAssistant
from .engine.completeness import CompletenessScorer
from .errors import InvalidActionError, InvalidRequestError
from .models.base import WireModel
from .models.listing import ListingDraft
from .models.requests import Action, assistant_request_adapter


logger = logging.getLogger(__name__)

Handler = Callable[[ListingDraft], WireModel]


class AssistantService:
    """
    Single entry point for all assistant actions.
    Every Action must have a handler; construction fails otherwise.
    """

    def __init__(
        self,
        scorer: Optional[CompletenessScorer] = None,
        assistant: Optional[GenerativeAssistant] = None,
    ):
        self.scorer = scorer or CompletenessScorer()
        self.assistant = assistant or GenerativeAssistant()

        self.handlers: dict[Action, Handler] = {
            Action.SCORE_COMPLETENESS: self.scorer.score,
            Action.GENERATE_DESCRIPTION: self.assistant.generate_description,
            Action.OPTIMIZE_TITLE: self.assistant.optimize_title,
            Action.RECOMMEND_CATEGORY: self.assistant.recommend_category,
            Action.ANALYZE_PRICING: self.assistant.analyze_pricing,
            Action.EXTRACT_KEYWORDS: self.assistant.extract_keywords,
            Action.GENERATE_FEATURES: self.assistant.generate_features,
        }
        missing = [action.value for action in Action if action not in self.handlers]
        if missing:
            raise RuntimeError(f"No handler registered for actions: {missing}")

    def handle(self, payload: Any) -> dict[str, Any]:
        """
        Run one assistant request.

        Args:
            payload: Decoded JSON body: {"action": ..., "data": {...}}

        Returns:
            JSON-ready result dict using wire field names

        Raises:
            InvalidActionError: Unknown or missing action
            InvalidRequestError: Data payload failed validation
            AssistantError: Raised by individual handlers
        """
        if not isinstance(payload, dict):
            raise InvalidActionError()

        try:
            action = Action(payload.get("action"))
        except ValueError:
            logger.warning("Rejected request with invalid action", extra={"action": str(payload.get("action"))})
            raise InvalidActionError() from None

        body = {"action": action.value, "data": payload.get("data") or {}}
        try:
            request = assistant_request_adapter.validate_python(body)
        except ValidationError as e:
            raise InvalidRequestError(_validation_message(e)) from e

        logger.info(f"Handling {action.value}", extra={"action": action.value})
        result = self.handlers[action](request.data)
        return result.to_wire()


def _validation_message(error: ValidationError) -> str:
    """First validation problem as a short message."""
    first = error.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"Invalid {location}: {first.get('msg', 'invalid value')}"
