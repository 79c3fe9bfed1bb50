"""Score and level tracking."""

from __future__ import annotations

from dataclasses import dataclass

MAX_LEVEL = 10
MAX_COMPLETE_LINES = 4
SCORE_PER_LEVEL = 600
LINE_SCORES = (100, 300, 700, 1500)


@dataclass
class GameStatus:
    """The current score and level."""

    score: int = 0
    level: int = 0

    def reset(self) -> None:
        """Start again from nothing."""
        self.score = 0
        self.level = 0

    def add_score(self, complete_lines: int) -> None:
        """Award points for lines cleared at once; four or more count as four."""
        if complete_lines <= 0:
            return
        lines = min(complete_lines, MAX_COMPLETE_LINES)
        self.score += LINE_SCORES[lines - 1]

    def update_level(self) -> None:
        """Derive the level from the score, capped at the highest level."""
        self.level = min(self.score // SCORE_PER_LEVEL, MAX_LEVEL)