# gridsnake/core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional, Protocol, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .area import Area

CELL_MAX = 0xFFFF  # terminal coordinates are 16-bit


class Cell(NamedTuple):
    x: int
    y: int


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))


class Status(Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


class Reason(Enum):
    SELF_COLLISION = "self"
    WALL_COLLISION = "wall"
    BOARD_FULL = "board_full"


class Style(Enum):
    HEAD = "head"
    BODY = "body"
    WALL = "wall"
    FOOD = "food"


class Glyph(NamedTuple):
    cell: Cell
    char: str
    style: Style


class CollisionIndex(Protocol):
    """Anything that can answer "does this cell collide with me?"."""
    def has_collision(self, cell: Cell) -> bool: ...


class CollisionGroup:
    """Union of several indexes: collides if any member does."""
    def __init__(self, *indexes: CollisionIndex):
        self.indexes = indexes

    def has_collision(self, cell: Cell) -> bool:
        return any(ix.has_collision(cell) for ix in self.indexes)


@dataclass(frozen=True)
class Snapshot:
    body: Tuple[Cell, ...]   # head first
    food: Tuple[Cell, ...]
    direction: Direction
    status: Status
    reason: Optional[Reason]
    tick: int
    area: "Area"

    @property
    def head(self) -> Optional[Cell]:
        return self.body[0] if self.body else None

    @property
    def terminated(self) -> bool:
        return self.status is Status.TERMINATED
