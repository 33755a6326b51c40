from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Rules
    starting_matchsticks: int = Field(default=20, ge=1)
    # Pass the turn when a move is refused (state otherwise unchanged)
    advance_turn_on_refusal: bool = False

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="MATCHSTICKS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


settings = Settings()
