# gridsnake/viz/keyboard.py
from __future__ import annotations
import curses
import pygame as pg
from gridsnake.core.interfaces import Direction
from .render_iface import InputSource, Key, QUIT
from .renderer_terminal import Terminal

TERMINAL_KEYS = {
    curses.KEY_UP: Direction.UP, ord("w"): Direction.UP, ord("k"): Direction.UP,
    curses.KEY_DOWN: Direction.DOWN, ord("s"): Direction.DOWN, ord("j"): Direction.DOWN,
    curses.KEY_LEFT: Direction.LEFT, ord("a"): Direction.LEFT, ord("h"): Direction.LEFT,
    curses.KEY_RIGHT: Direction.RIGHT, ord("d"): Direction.RIGHT, ord("l"): Direction.RIGHT,
    ord("q"): QUIT,
    27: QUIT,  # Esc
    3: QUIT,   # Ctrl-C arrives as a key in raw mode
}

PYGAME_KEYS = {
    pg.K_UP: Direction.UP, pg.K_w: Direction.UP,
    pg.K_DOWN: Direction.DOWN, pg.K_s: Direction.DOWN,
    pg.K_LEFT: Direction.LEFT, pg.K_a: Direction.LEFT,
    pg.K_RIGHT: Direction.RIGHT, pg.K_d: Direction.RIGHT,
    pg.K_ESCAPE: QUIT, pg.K_q: QUIT,
}


class TerminalKeyboard(InputSource):
    def __init__(self, terminal: Terminal):
        self.terminal = terminal

    def poll(self, timeout_ms: int) -> Key:
        scr = self.terminal.screen
        assert scr is not None, "Terminal not entered"
        scr.timeout(max(0, timeout_ms))
        ch = scr.getch()
        if ch == -1:
            return None
        return TERMINAL_KEYS.get(ch)


class PygameKeyboard(InputSource):
    def poll(self, timeout_ms: int) -> Key:
        # other events (mouse, focus, key-up) don't end the wait early
        deadline = pg.time.get_ticks() + timeout_ms
        while True:
            remaining = deadline - pg.time.get_ticks()
            # wait(0) would block forever
            e = pg.event.wait(remaining) if remaining > 0 else pg.event.poll()
            if e.type == pg.QUIT:
                return QUIT
            if e.type == pg.KEYDOWN and e.key in PYGAME_KEYS:
                return PYGAME_KEYS[e.key]
            if e.type == pg.NOEVENT or remaining <= 0:
                return None
