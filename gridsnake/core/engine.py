# gridsnake/core/engine.py  (pure rules, no terminal/pygame)
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, TYPE_CHECKING
import random
from .area import Area
from .body import Body
from .food import Food, BoardFullError
from .interfaces import Cell, CollisionGroup, Direction, Glyph, Reason, Snapshot, Status
from .projection import project

if TYPE_CHECKING:
    from gridsnake.config import AppConfig


@dataclass(slots=True)
class GameState:
    area: Area
    body: Body
    food: Food
    direction: Direction
    status: Status = Status.RUNNING
    reason: Optional[Reason] = None
    tick: int = 0


@dataclass(frozen=True)
class TickResult:
    snapshot: Snapshot
    frame: List[Glyph]

    @property
    def terminated(self) -> bool:
        return self.snapshot.terminated


class TickEngine:
    def __init__(
        self,
        area: Area,
        seed: Cell,
        direction: Direction = Direction.DOWN,
        rng: Optional[random.Random] = None,
        *,
        food_count: int = 1,
        allow_reversal: bool = False,
        max_spawn_attempts: int = 64,
    ):
        seed = Cell(*seed)
        if area.has_collision(seed):
            raise ValueError(f"seed {seed} is not inside {area}")
        if food_count < 1:
            raise ValueError("food_count must be >= 1")
        self.rng = rng if rng is not None else random.Random()
        self.allow_reversal = allow_reversal
        body = Body([seed])
        food = Food(self.rng, max_attempts=max_spawn_attempts)
        self._state = GameState(area=area, body=body, food=food, direction=direction)
        for _ in range(food_count):
            food.spawn(area, CollisionGroup(body, area))

    @classmethod
    def from_config(cls, cfg: "AppConfig", area: Area) -> "TickEngine":
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        seed = cfg.seed_cell if cfg.seed_cell is not None else Cell(area.start.x + 1, area.start.y + 1)
        return cls(
            area,
            seed,
            Direction[cfg.start_direction.upper()],
            random.Random(cfg.seed),
            food_count=cfg.food_count,
            allow_reversal=cfg.allow_reversal,
            max_spawn_attempts=cfg.max_spawn_attempts,
        )

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def running(self) -> bool:
        return self._state.status is Status.RUNNING

    def steer(self, direction: Direction) -> None:
        s = self._state
        if (not self.allow_reversal and len(s.body) > 1
                and direction is s.direction.opposite):
            # ignore an instant 180° turn into the neck
            return
        s.direction = direction

    def tick(self) -> TickResult:
        s = self._state
        if s.status is Status.RUNNING:
            self._step(s)
        snap = self.snapshot()
        return TickResult(snapshot=snap, frame=project(snap))

    def _step(self, s: GameState) -> None:
        s.tick += 1
        nxt = s.body.advance(s.direction)

        # checked against the body before its tail moves
        if s.body.has_collision(nxt):
            self._terminate(Reason.SELF_COLLISION)
            return
        if s.area.has_collision(nxt):
            self._terminate(Reason.WALL_COLLISION)
            return

        if s.food.has_collision(nxt):
            s.body.grow_to(nxt)
            s.food.consume(nxt)
            try:
                s.food.spawn(s.area, CollisionGroup(s.body, s.area))
            except BoardFullError:
                self._terminate(Reason.BOARD_FULL)
        else:
            s.body.move_to(nxt)

    def _terminate(self, reason: Reason) -> None:
        self._state.status = Status.TERMINATED
        self._state.reason = reason

    def snapshot(self) -> Snapshot:
        s = self._state
        return Snapshot(
            body=s.body.cells(),
            food=s.food.cells(),
            direction=s.direction,
            status=s.status,
            reason=s.reason,
            tick=s.tick,
            area=s.area,
        )
