# cover_bot/data/settings.py
from typing import Literal

from pydantic import BaseModel, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from cover_bot.data.constants import DEFAULT_IMAGE_MODEL


class BotConfig(BaseModel):
    token: SecretStr | None = None


class GoogleConfig(BaseModel):
    # AI Studio key; used unless use_vertex is set
    api_key: SecretStr | None = None
    use_vertex: bool = False
    project_id: str | None = None
    location: str = "global"
    service_account_creds_json: SecretStr | None = None


class GenerationConfig(BaseModel):
    """Which image provider to call and how."""
    client: Literal["google", "mock"] = "google"
    model: str = DEFAULT_IMAGE_MODEL
    temperature: float = 0.6
    top_p: float = 0.95
    top_k: int = 32
    request_timeout_s: int = 120
    mock_latency_s: float = 1.0


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    bot: BotConfig = Field(default_factory=BotConfig)
    google: GoogleConfig = Field(default_factory=GoogleConfig)
    generation: GenerationConfig = Field(default_factory=GenerationConfig)

    default_template_id: str = "vogue"
    # Sessions kept in memory before the least recently used one is evicted
    max_sessions: int = 1000
    logging_level: int = 20


settings = Settings()
