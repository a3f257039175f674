"""
Exceptions raised by the listing assistant.
"""


class AssistantError(Exception):
    """Base class for errors surfaced to API callers as client errors."""


class InvalidActionError(AssistantError):
    """The request named an action that does not exist."""

    def __init__(self, message: str = "Invalid action"):
        super().__init__(message)


class InvalidRequestError(AssistantError):
    """The request payload could not be validated."""


class MissingFieldError(AssistantError):
    """A component needs a field the draft does not have."""


class AIResponseParseError(AssistantError):
    """The generative backend answered with content we could not use."""

    def __init__(self, message: str = "Failed to parse AI response"):
        super().__init__(message)


class LexiconError(Exception):
    """The lexicon data file is missing or malformed."""
