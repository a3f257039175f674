"""
Configuration and environment handling for the listing assistant.
"""
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load environment variables
load_dotenv()


DEFAULT_LEXICON_PATH = Path(__file__).parent / "data" / "lexicon.json"


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: list[str]) -> list[str]:
    value = os.getenv(name)
    if not value:
        return default
    return [item.strip() for item in value.split(",") if item.strip()]


class OpenAIConfig(BaseModel):
    """OpenAI API configuration."""
    api_key: str = Field(default_factory=lambda: os.getenv("OPENAI_API_KEY", ""))
    model: str = Field(default_factory=lambda: os.getenv("LISTING_ASSISTANT_MODEL", "gpt-4o-mini"))
    max_tokens: int = Field(default=1000)
    temperature: float = Field(default=0.7)
    timeout_seconds: float = Field(
        default_factory=lambda: float(os.getenv("LISTING_ASSISTANT_AI_TIMEOUT", "10")),
        gt=0,
        description="Upper bound for a single generation request",
    )


class AssistantConfig(BaseModel):
    """Heuristic engine configuration."""
    default_base_price: float = Field(default=29.99, description="Base price when none is given")
    max_recommendations: int = Field(default=3)
    max_title_suggestions: int = Field(default=3)
    max_features: int = Field(default=7)
    lexicon_path: Path = Field(
        default_factory=lambda: Path(os.getenv("LISTING_ASSISTANT_LEXICON", str(DEFAULT_LEXICON_PATH)))
    )
    enable_ai: bool = Field(default_factory=lambda: _env_bool("LISTING_ASSISTANT_ENABLE_AI", True))


class ServerConfig(BaseModel):
    """HTTP server configuration."""
    host: str = Field(default_factory=lambda: os.getenv("LISTING_ASSISTANT_HOST", "127.0.0.1"))
    port: int = Field(default_factory=lambda: int(os.getenv("LISTING_ASSISTANT_PORT", "8000")))
    cors_origins: list[str] = Field(
        default_factory=lambda: _env_list("LISTING_ASSISTANT_CORS_ORIGINS", ["*"])
    )
    log_level: str = Field(default_factory=lambda: os.getenv("LISTING_ASSISTANT_LOG_LEVEL", "INFO"))
    json_logs: bool = Field(default_factory=lambda: _env_bool("LISTING_ASSISTANT_JSON_LOGS", True))


class Config(BaseModel):
    """Main configuration."""
    openai: OpenAIConfig = Field(default_factory=OpenAIConfig)
    assistant: AssistantConfig = Field(default_factory=AssistantConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)

    version: str = Field(default="2.0.0")


# Singleton config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the singleton config instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Drop the cached config so the next get_config() re-reads the environment."""
    global _config
    _config = None
