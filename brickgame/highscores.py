"""The table of best scores and its binary file."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from pathlib import Path

HIGHSCORES_COUNT = 5
HIGHSCORES_FILE = "highscores.highscores"
NAME_SIZE = 20
MAX_NAME_LENGTH = 17

# One record: a flag byte, a NUL-padded name, padding, a 32-bit score.
_RECORD = struct.Struct("<?20s3xi")
_FILE_SIZE = _RECORD.size * HIGHSCORES_COUNT


@dataclass
class Highscore:
    """One row of the table."""

    name: str = ""
    score: int = 0
    is_current_player: bool = False


class Highscores:
    """A fixed-size table ordered from best to worst score.

    When ``path`` is given, every change is written to it and read back.
    """

    def __init__(self, path=None) -> None:
        self.path = path
        self.entries = [Highscore() for _ in range(HIGHSCORES_COUNT)]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def __getitem__(self, index: int) -> Highscore:
        return self.entries[index]

    def clear(self) -> None:
        """Empty every row."""
        self.entries = [Highscore() for _ in range(HIGHSCORES_COUNT)]

    def add(self, name: str, score: int) -> None:
        """Record a score; a known name keeps its best, a new one takes its place."""
        if not name:
            return
        handled = False
        for entry in self.entries:
            if entry.name == name:
                if score > entry.score:
                    entry.score = score
                handled = True

        if not handled:
            position = HIGHSCORES_COUNT
            for index in reversed(range(HIGHSCORES_COUNT)):
                if score > self.entries[index].score:
                    position = index
                else:
                    break
            if position < HIGHSCORES_COUNT:
                self.entries.insert(
                    position,
                    Highscore(name=name[:MAX_NAME_LENGTH], score=score, is_current_player=True),
                )
                del self.entries[HIGHSCORES_COUNT:]

        self.sort()
        self._persist()

    def remove(self, name: str) -> None:
        """Drop the first row with this name and leave an empty row at the end."""
        for index, entry in enumerate(self.entries):
            if entry.name == name:
                del self.entries[index]
                self.entries.append(Highscore())
                break
        self.sort()
        self._persist()

    def sort(self) -> None:
        """Order rows by score, highest first, keeping ties in place."""
        self.entries.sort(key=lambda entry: entry.score, reverse=True)

    def save(self, path) -> None:
        """Write the table to ``path``."""
        data = b"".join(
            _RECORD.pack(
                entry.is_current_player,
                entry.name.encode("utf-8")[: NAME_SIZE - 1],
                entry.score,
            )
            for entry in self.entries
        )
        Path(path).write_bytes(data)

    def load(self, path) -> bool:
        """Read the table from ``path``; False if it is missing or too short."""
        try:
            data = Path(path).read_bytes()
        except FileNotFoundError:
            return False
        if len(data) < _FILE_SIZE:
            return False
        self.entries = [
            Highscore(
                name=raw_name.split(b"\0", 1)[0].decode("utf-8", errors="replace"),
                score=score,
                is_current_player=flag,
            )
            for flag, raw_name, score in _RECORD.iter_unpack(data[:_FILE_SIZE])
        ]
        return True

    def _persist(self) -> None:
        if self.path is not None:
            self.save(self.path)
            self.load(self.path)