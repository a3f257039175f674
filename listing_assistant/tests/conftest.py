"""
Shared fixtures. Tests never reach the OpenAI API: the key is cleared
and generative paths use stub clients.
"""
from typing import Optional

import pytest

from listing_assistant.ai.llm_client import GenerationResult
from listing_assistant.config import reset_config
from listing_assistant.lexicon import clear_cache, get_lexicon


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Fresh config without credentials for every test."""
    monkeypatch.setenv("OPENAI_API_KEY", "")
    monkeypatch.delenv("LISTING_ASSISTANT_LEXICON", raising=False)
    monkeypatch.delenv("LISTING_ASSISTANT_ENABLE_AI", raising=False)
    reset_config()
    clear_cache()
    yield
    reset_config()
    clear_cache()


@pytest.fixture
def lexicon():
    return get_lexicon()


class StubLLM:
    """Stands in for LLMClient and records the prompts it receives."""

    def __init__(self, result: Optional[GenerationResult] = None, available: bool = True):
        self.result = result or GenerationResult(success=False, error="stub", demo_mode=True)
        self.available = available
        self.calls: list[tuple[str, str]] = []

    def is_available(self) -> bool:
        return self.available

    def generate(self, prompt: str, system_prompt: str) -> GenerationResult:
        self.calls.append((prompt, system_prompt))
        return self.result


@pytest.fixture
def stub_llm():
    """The StubLLM class, for tests that need a custom result."""
    return StubLLM


@pytest.fixture
def demo_llm() -> StubLLM:
    """LLM stub behaving like a client without an API key."""
    return StubLLM(available=False)


@pytest.fixture
def complete_draft_data() -> dict:
    """Wire payload for a listing that satisfies every rubric item."""
    return {
        "title": "Wireless Bluetooth Headphones Pro",
        "description": " ".join(
            ["Comfortable over-ear headphones with deep bass and long battery life."] * 6
        ),
        "price": 59.99,
        "stock": 12,
        "category_id": "electronics",
        "images": [f"https://cdn.example.com/img/{i}.jpg" for i in range(4)],
    }
