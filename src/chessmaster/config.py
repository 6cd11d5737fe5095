"""User-configurable bot settings."""

from __future__ import annotations

from dataclasses import dataclass

from chessmaster.core.enums import Color
from chessmaster.engine.search import Difficulty


@dataclass
class EngineSettings:
    """All settings that shape a game against the bot."""

    difficulty: Difficulty = Difficulty.MEDIUM

    # Pause before a bot move is handed back, so the reply does not look
    # instantaneous.  Never affects which move is chosen.
    thinking_delay_ms: int = 500

    bot_color: Color = Color.BLACK

    def __post_init__(self) -> None:
        if isinstance(self.difficulty, str):
            self.difficulty = Difficulty.from_name(self.difficulty)
        if self.thinking_delay_ms < 0:
            raise ValueError(
                f"thinking_delay_ms must be >= 0, got {self.thinking_delay_ms}"
            )
