# gridsnake/core/body.py
from __future__ import annotations
from collections import deque
from typing import Deque, Iterable, Iterator, Optional, Set, Tuple
from .interfaces import Cell, Direction, CELL_MAX


class LookupQueue:
    """Ordered cells (front = newest) with O(1) membership.

    The deque and the set are only ever mutated together.
    """
    def __init__(self, cells: Iterable[Cell] = ()):
        self._order: Deque[Cell] = deque()
        self._members: Set[Cell] = set()
        for c in cells:
            c = Cell(*c)
            if c in self._members:
                raise ValueError(f"duplicate cell {c}")
            self._order.append(c)
            self._members.add(c)

    def push_front(self, cell: Cell) -> None:
        self._order.appendleft(cell)
        self._members.add(cell)
        assert len(self._order) == len(self._members), f"duplicate cell {cell}"

    def pop_back(self) -> Optional[Cell]:
        if not self._order:
            return None
        cell = self._order.pop()
        self._members.remove(cell)
        return cell

    def remove(self, cell: Cell) -> Cell:
        self._members.remove(cell)  # KeyError if absent
        self._order.remove(cell)
        return cell

    def head(self) -> Optional[Cell]:
        return self._order[0] if self._order else None

    def contains(self, cell: Cell) -> bool:
        return cell in self._members

    __contains__ = contains

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._order)

    def __len__(self) -> int:
        return len(self._order)

    def consistent(self) -> bool:
        return len(self._order) == len(self._members) and set(self._order) == self._members


def _clamp(v: int) -> int:
    return min(max(v, 0), CELL_MAX)


class Body:
    """The snake: head at index 0, tail at the end."""
    def __init__(self, cells: Iterable[Cell]):
        self._q = LookupQueue(cells)

    def head(self) -> Optional[Cell]:
        return self._q.head()

    def advance(self, direction: Direction) -> Cell:
        """Next head cell; saturates at the coordinate range instead of wrapping."""
        head = self._q.head()
        assert head is not None, "empty body"
        dx, dy = direction.delta
        return Cell(_clamp(head.x + dx), _clamp(head.y + dy))

    def grow_to(self, cell: Cell) -> None:
        self._q.push_front(cell)

    def move_to(self, cell: Cell) -> None:
        # tail leaves before the head lands
        self._q.pop_back()
        self._q.push_front(cell)

    def has_collision(self, cell: Cell) -> bool:
        return cell in self._q

    def cells(self) -> Tuple[Cell, ...]:
        return tuple(self._q)

    def consistent(self) -> bool:
        return self._q.consistent()

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._q)

    def __len__(self) -> int:
        return len(self._q)
