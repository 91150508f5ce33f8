from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Color(Enum):
    RED = "red"
    BLACK = "black"

    @property
    def opponent(self) -> "Color":
        return Color.BLACK if self is Color.RED else Color.RED


@dataclass(slots=True)
class Piece:
    """A man or king. ``promote()`` is the only change a piece on the board
    undergoes; callers outside the board get copies via ``getCopy()``."""

    color: Color
    is_king: bool = False

    def promote(self) -> None:
        self.is_king = True

    def getCopy(self) -> "Piece":
        return Piece(self.color, self.is_king)

    def __repr__(self) -> str:
        piece_type = "K" if self.is_king else "M"
        return f"{piece_type}({self.color.name})"
