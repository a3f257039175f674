"""
OpenAI LLM client that reports failures as results instead of raising.
"""
import json
import logging
from typing import Optional, Type, TypeVar

from openai import OpenAI, OpenAIError
from pydantic import BaseModel, ValidationError

from ..config import OpenAIConfig, get_config
from ..errors import AIResponseParseError


logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class GenerationResult(BaseModel):
    """Outcome of one generation request."""
    success: bool
    content: Optional[str] = None
    error: Optional[str] = None
    demo_mode: bool = False


class LLMClient:
    """
    OpenAI chat client with a bounded timeout and a single attempt.
    Without an API key it runs in demo mode and never touches the network.
    """

    def __init__(self, config: Optional[OpenAIConfig] = None, client: Optional[OpenAI] = None):
        config = config or get_config().openai
        self.api_key = config.api_key
        self.model = config.model
        self.max_tokens = config.max_tokens
        self.temperature = config.temperature
        self.timeout = config.timeout_seconds

        if client is not None:
            self.client = client
        elif not self.api_key:
            logger.warning("No OpenAI API key configured, generative features run in demo mode")
            self.client = None
        else:
            self.client = OpenAI(api_key=self.api_key, timeout=self.timeout, max_retries=0)

    def is_available(self) -> bool:
        """Check if the LLM client is properly configured."""
        return self.client is not None

    def generate(
        self,
        prompt: str,
        system_prompt: str,
    ) -> GenerationResult:
        """
        Make one completion request.

        Args:
            prompt: User prompt
            system_prompt: System context

        Returns:
            GenerationResult; failures are reported, not raised
        """
        if not self.client:
            return GenerationResult(success=False, error="No API key configured", demo_mode=True)

        kwargs = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": prompt},
            ],
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
            "response_format": {"type": "json_object"},
        }

        try:
            response = self.client.chat.completions.create(**kwargs)
        except OpenAIError as e:
            logger.warning(
                f"Generation request failed: {type(e).__name__}: {e}",
                extra={"model": self.model},
            )
            return GenerationResult(success=False, error=str(e) or type(e).__name__)

        content = response.choices[0].message.content if response.choices else None
        if not content:
            logger.warning("Generation returned empty content", extra={"model": self.model})
            return GenerationResult(success=False, error="Empty response from AI")

        return GenerationResult(success=True, content=content)


def parse_json_content(content: str, response_model: Type[T]) -> T:
    """
    Parse generated text into a Pydantic model.

    Raises:
        AIResponseParseError: If the text is not JSON or does not match the schema
    """
    text = content.strip()
    # Some models wrap JSON in a markdown fence even in JSON mode
    if text.startswith("```"):
        text = text.strip("`")
        if text.lower().startswith("json"):
            text = text[4:]

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON from LLM: {e}")
        raise AIResponseParseError() from e

    try:
        return response_model.model_validate(data)
    except ValidationError as e:
        logger.error(f"LLM response does not match {response_model.__name__}: {e}")
        raise AIResponseParseError() from e
