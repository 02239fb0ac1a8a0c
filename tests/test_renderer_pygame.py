import pygame as pg
import pytest

import gridsnake.viz.renderer_colors as theme
from gridsnake.config import AppConfig
from gridsnake.core.area import Area
from gridsnake.core.interfaces import Cell, Direction, Glyph, Style
from gridsnake.viz.keyboard import PygameKeyboard
from gridsnake.viz.render_iface import QUIT
from gridsnake.viz.renderer_pygame import PygameRenderer

def _rgb(c):
    cc = pg.Color(c)
    return (cc.r, cc.g, cc.b)

@pytest.fixture
def area():
    return Area(Cell(10, 5), Cell(14, 9))

@pytest.fixture
def surface():
    pg.init()
    yield pg.Surface((5 * 8, 5 * 8))
    pg.quit()

def test_rejects_config_class():
    with pytest.raises(TypeError):
        PygameRenderer(AppConfig)

def test_cells_are_drawn_relative_to_the_area(area, surface):
    ren = PygameRenderer(AppConfig(render_cell=8))
    ren.attach_surface(surface, area)
    ren.draw([
        Glyph(Cell(11, 6), "@", Style.HEAD),
        Glyph(Cell(12, 6), "o", Style.BODY),
        Glyph(Cell(10, 5), " ", Style.WALL),
        Glyph(Cell(13, 8), "$", Style.FOOD),
    ])
    assert _rgb(surface.get_at((1 * 8 + 4, 1 * 8 + 4))) == theme.HEAD
    assert _rgb(surface.get_at((2 * 8 + 4, 1 * 8 + 4))) == theme.BODY
    assert _rgb(surface.get_at((4, 4))) == theme.WALL
    assert _rgb(surface.get_at((3 * 8 + 4, 3 * 8 + 4))) == theme.FOOD
    assert _rgb(surface.get_at((2 * 8 + 4, 2 * 8 + 4))) == theme.BG

def test_draw_before_open_fails(area):
    with pytest.raises(AssertionError):
        PygameRenderer(AppConfig()).draw([])

def test_window_open_and_close(area):
    ren = PygameRenderer(AppConfig(render_cell=8))
    ren.open(area)
    assert ren.surf.get_size() == (5 * 8, 5 * 8)
    ren.draw([Glyph(Cell(11, 6), "@", Style.HEAD)])
    ren.close()
    assert ren.surf is None

def test_keyboard_reads_pygame_events(area):
    ren = PygameRenderer(AppConfig(render_cell=8))
    ren.open(area)
    try:
        kbd = PygameKeyboard()
        pg.event.clear()
        pg.event.post(pg.event.Event(pg.KEYDOWN, key=pg.K_LEFT))
        assert kbd.poll(10) is Direction.LEFT
        pg.event.post(pg.event.Event(pg.KEYDOWN, key=pg.K_F1))
        assert kbd.poll(10) is None
        pg.event.post(pg.event.Event(pg.QUIT))
        assert kbd.poll(10) == QUIT
    finally:
        ren.close()

def test_keyboard_waits_out_non_key_events(area):
    ren = PygameRenderer(AppConfig(render_cell=8))
    ren.open(area)
    try:
        kbd = PygameKeyboard()
        pg.event.clear()
        pg.event.post(pg.event.Event(pg.MOUSEMOTION, pos=(3, 3), rel=(1, 1), buttons=(0, 0, 0)))
        pg.event.post(pg.event.Event(pg.KEYUP, key=pg.K_LEFT))
        start = pg.time.get_ticks()
        assert kbd.poll(200) is None
        assert pg.time.get_ticks() - start >= 190
    finally:
        ren.close()

def test_keyboard_key_after_mouse_motion(area):
    ren = PygameRenderer(AppConfig(render_cell=8))
    ren.open(area)
    try:
        kbd = PygameKeyboard()
        pg.event.clear()
        pg.event.post(pg.event.Event(pg.MOUSEMOTION, pos=(3, 3), rel=(1, 1), buttons=(0, 0, 0)))
        pg.event.post(pg.event.Event(pg.KEYDOWN, key=pg.K_UP))
        assert kbd.poll(200) is Direction.UP
    finally:
        ren.close()

def test_keyboard_zero_timeout_does_not_block(area):
    ren = PygameRenderer(AppConfig(render_cell=8))
    ren.open(area)
    try:
        pg.event.clear()
        assert PygameKeyboard().poll(0) is None
    finally:
        ren.close()
