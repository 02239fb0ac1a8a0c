import random

import pytest

from gridsnake.core.area import Area
from gridsnake.core.body import Body
from gridsnake.core.food import BoardFullError, Food
from gridsnake.core.interfaces import Cell, CollisionGroup

def test_spawn_lands_strictly_inside_and_off_the_body(area, rng):
    body = Body([Cell(x, 12) for x in range(10, 40)])
    food = Food(rng)
    for _ in range(200):
        c = food.spawn(area, CollisionGroup(body, area))
        assert not area.has_collision(c)
        assert not body.has_collision(c)
        food.consume(c)

def test_spawn_never_stacks_on_existing_food(rng):
    small = Area(Cell(0, 0), Cell(3, 3))   # 2x2 interior
    food = Food(rng)
    placed = {food.spawn(small, small) for _ in range(4)}
    assert placed == {Cell(1, 1), Cell(2, 1), Cell(1, 2), Cell(2, 2)}
    assert len(food) == 4

def test_board_full_raises(rng):
    small = Area(Cell(0, 0), Cell(3, 3))
    body = Body([Cell(1, 1), Cell(2, 1), Cell(2, 2), Cell(1, 2)])
    with pytest.raises(BoardFullError):
        Food(rng).spawn(small, CollisionGroup(body, small))

def test_fallback_picks_the_only_free_cell():
    a = Area(Cell(0, 0), Cell(11, 11))     # 10x10 interior
    free = Cell(7, 3)
    body = Body([Cell(*c) for c in a.interior_cells().tolist() if tuple(c) != free])
    # zero sampling attempts forces enumeration of free cells
    food = Food(random.Random(0), max_attempts=0)
    assert food.spawn(a, CollisionGroup(body, a)) == free

def test_consume_removes_and_returns(rng):
    food = Food(rng, [Cell(3, 3), Cell(4, 4)])
    assert food.consume(Cell(3, 3)) == Cell(3, 3)
    assert not food.has_collision(Cell(3, 3))
    assert food.cells() == (Cell(4, 4),)
    with pytest.raises(KeyError):
        food.consume(Cell(3, 3))

def test_spawn_is_deterministic_for_a_seed(area):
    a = Food(random.Random(7)).spawn(area, area)
    b = Food(random.Random(7)).spawn(area, area)
    assert a == b
