from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass
class CellGrid:
    chars: list[str]  # one string per row
    colours: np.ndarray | None  # (rows, cols, 3) uint8, or None

    @property
    def rows(self) -> int:
        return len(self.chars)
