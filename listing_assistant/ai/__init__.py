"""AI modules for generative listing suggestions."""

from .llm_client import GenerationResult, LLMClient
from .assistant import GenerativeAssistant, with_fallback

__all__ = ["GenerationResult", "LLMClient", "GenerativeAssistant", "with_fallback"]
