# gridsnake/core/food.py
from __future__ import annotations
import random
from typing import Iterable, Iterator, Tuple
from .area import Area
from .body import LookupQueue
from .interfaces import Cell, CollisionGroup, CollisionIndex


class BoardFullError(RuntimeError):
    """No free interior cell is left to place food on."""


class Food:
    def __init__(self, rng: random.Random, cells: Iterable[Cell] = (), max_attempts: int = 64):
        if max_attempts < 0:
            raise ValueError("max_attempts must be >= 0")
        self.rng = rng
        self.max_attempts = max_attempts
        self._q = LookupQueue(cells)

    def has_collision(self, cell: Cell) -> bool:
        return cell in self._q

    def consume(self, cell: Cell) -> Cell:
        """Remove ``cell``; respawning is the caller's job."""
        return self._q.remove(cell)

    def spawn(self, area: Area, index: CollisionIndex) -> Cell:
        """Place one food cell on a free interior cell and return it.

        Rejection-samples first; once ``max_attempts`` draws have collided it
        picks uniformly among the cells that are actually free.
        """
        blocked = CollisionGroup(index, self)
        for _ in range(self.max_attempts):
            cell = Cell(self.rng.randint(area.start.x + 1, area.end.x - 1),
                        self.rng.randint(area.start.y + 1, area.end.y - 1))
            if not blocked.has_collision(cell):
                break
        else:
            cell = self._pick_free(area, blocked)
        self._q.push_front(cell)
        return cell

    def _pick_free(self, area: Area, blocked: CollisionIndex) -> Cell:
        interior = area.interior_cells()
        free = [i for i, (x, y) in enumerate(interior.tolist())
                if not blocked.has_collision(Cell(x, y))]
        if not free:
            raise BoardFullError(f"no free cell left in {area.width}x{area.height} area")
        x, y = interior[self.rng.choice(free)].tolist()
        return Cell(x, y)

    def cells(self) -> Tuple[Cell, ...]:
        return tuple(self._q)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._q)

    def __len__(self) -> int:
        return len(self._q)
