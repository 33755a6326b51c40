"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from src.config import Settings


def test_defaults(monkeypatch):
    for name in ("STARTING_MATCHSTICKS", "ADVANCE_TURN_ON_REFUSAL", "LOG_LEVEL"):
        monkeypatch.delenv(f"MATCHSTICKS_{name}", raising=False)

    settings = Settings(_env_file=None)

    assert settings.starting_matchsticks == 20
    assert settings.advance_turn_on_refusal is False
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("MATCHSTICKS_STARTING_MATCHSTICKS", "7")
    monkeypatch.setenv("matchsticks_advance_turn_on_refusal", "true")

    settings = Settings(_env_file=None)

    assert settings.starting_matchsticks == 7
    assert settings.advance_turn_on_refusal is True


def test_rejects_non_positive_matchsticks():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, starting_matchsticks=0)
