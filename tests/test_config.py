"""Tests for bot settings."""

import pytest

from chessmaster.config import EngineSettings
from chessmaster.core.enums import Color
from chessmaster.engine.search import Difficulty


class TestEngineSettings:
    def test_defaults(self) -> None:
        settings = EngineSettings()
        assert settings.difficulty == Difficulty.MEDIUM
        assert settings.thinking_delay_ms == 500
        assert settings.bot_color == Color.BLACK

    def test_difficulty_by_name(self) -> None:
        assert EngineSettings(difficulty="hard").difficulty == Difficulty.HARD

    def test_unknown_difficulty(self) -> None:
        with pytest.raises(ValueError):
            EngineSettings(difficulty="impossible")

    def test_negative_delay(self) -> None:
        with pytest.raises(ValueError):
            EngineSettings(thinking_delay_ms=-1)
