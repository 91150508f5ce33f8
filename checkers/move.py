from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

Coordinate = tuple[int, int]


@dataclass(frozen=True, slots=True)
class Move:
    start: Coordinate
    end: Coordinate
    capture: Optional[Coordinate] = None

    @property
    def is_capture(self) -> bool:
        return self.capture is not None

    def __str__(self) -> str:
        connector = " x " if self.is_capture else " - "
        return f"{self.start[0]},{self.start[1]}{connector}{self.end[0]},{self.end[1]}"
