# gridsnake/core/area.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional
import numpy as np
from .interfaces import Cell


@dataclass(frozen=True, slots=True)
class Area:
    """Axis-aligned playfield. The rectangle's own border is the wall."""
    start: Cell
    end: Cell

    def __post_init__(self):
        object.__setattr__(self, "start", Cell(*self.start))
        object.__setattr__(self, "end", Cell(*self.end))
        if not (self.start.x < self.end.x and self.start.y < self.end.y):
            raise ValueError(f"area corners out of order: {self.start} -> {self.end}")

    @classmethod
    def from_screen(cls, cols: int, rows: int, *, inset: Optional[int] = None,
                    fraction: float = 0.25) -> "Area":
        """Derive the playfield from the screen size.

        With ``inset`` the screen is shrunk by that many cells on every side,
        otherwise the middle ``1 - 2*fraction`` of each axis is used.
        """
        if inset is not None:
            if inset < 0:
                raise ValueError("inset must be >= 0")
            start = Cell(inset, inset)
            end = Cell(cols - 1 - inset, rows - 1 - inset)
        else:
            if not 0.0 <= fraction < 0.5:
                raise ValueError("fraction must be in [0, 0.5)")
            start = Cell(int(cols * fraction), int(rows * fraction))
            end = Cell(int(cols * (1 - fraction)), int(rows * (1 - fraction)))
        # curses can't write the screen's last cell, keep the wall inside it
        end = Cell(min(end.x, cols - 2), min(end.y, rows - 2))
        # room for the seed and one food
        if end.x <= start.x or end.y <= start.y or (end.x - start.x - 1) * (end.y - start.y - 1) < 2:
            raise ValueError(f"screen {cols}x{rows} too small for a playable area")
        return cls(start, end)

    @property
    def width(self) -> int:
        return self.end.x - self.start.x - 1

    @property
    def height(self) -> int:
        return self.end.y - self.start.y - 1

    def has_collision(self, cell: Cell) -> bool:
        x, y = cell
        return (x <= self.start.x or x >= self.end.x
                or y <= self.start.y or y >= self.end.y)

    def interior_cells(self) -> np.ndarray:
        """(N, 2) array of every strictly interior cell, row-major."""
        ys, xs = np.mgrid[self.start.y + 1:self.end.y, self.start.x + 1:self.end.x]
        return np.stack([xs.ravel(), ys.ravel()], axis=1)

    def perimeter(self) -> List[Cell]:
        x0, y0 = self.start
        xn, yn = self.end
        cells = [Cell(x, y0) for x in range(x0, xn + 1)]
        cells += [Cell(x, yn) for x in range(x0, xn + 1)]
        # sides without the corners already emitted
        cells += [Cell(x0, y) for y in range(y0 + 1, yn)]
        cells += [Cell(xn, y) for y in range(y0 + 1, yn)]
        return cells
