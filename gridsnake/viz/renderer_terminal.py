# gridsnake/viz/renderer_terminal.py
from __future__ import annotations
import curses
import locale
import random
from typing import Dict, Optional, Sequence, Tuple
from gridsnake.core.area import Area
from gridsnake.core.interfaces import Glyph, Style
from .render_iface import Renderer
from .renderer_colors import MATRIX_GLYPHS

_PAIRS = {
    Style.HEAD: (1, curses.COLOR_WHITE, curses.COLOR_BLACK),
    Style.BODY: (2, curses.COLOR_GREEN, curses.COLOR_BLACK),
    Style.WALL: (3, curses.COLOR_BLACK, curses.COLOR_MAGENTA),
    Style.FOOD: (4, curses.COLOR_WHITE, curses.COLOR_BLACK),
}


class Terminal:
    """Scoped raw-mode session on the controlling terminal.

    ``with Terminal() as term:`` puts the terminal in raw mode with the cursor
    hidden; leaving the block (normally or via any exception) shows the
    cursor, leaves raw mode, clears the screen and ends curses.
    """
    def __init__(self):
        self.screen = None

    def __enter__(self) -> "Terminal":
        locale.setlocale(locale.LC_ALL, "")
        self.screen = curses.initscr()
        try:
            curses.noecho()
            curses.raw()
            self.screen.keypad(True)
            self._cursor(False)
            if curses.has_colors():
                curses.start_color()
                for pair, fg, bg in _PAIRS.values():
                    curses.init_pair(pair, fg, bg)
        except BaseException:
            self._restore()
            raise
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self._restore()
        return False

    def size(self) -> Tuple[int, int]:
        """(cols, rows)"""
        assert self.screen is not None, "Terminal not entered"
        rows, cols = self.screen.getmaxyx()
        return cols, rows

    def style_attrs(self) -> Dict[Style, int]:
        if curses.has_colors():
            attrs = {style: curses.color_pair(pair) for style, (pair, _, _) in _PAIRS.items()}
            attrs[Style.BODY] |= curses.A_BOLD
            attrs[Style.FOOD] |= curses.A_BOLD
            return attrs
        return {Style.HEAD: curses.A_BOLD, Style.BODY: curses.A_NORMAL,
                Style.WALL: curses.A_REVERSE, Style.FOOD: curses.A_BOLD}

    def _restore(self) -> None:
        scr, self.screen = self.screen, None
        try:
            if scr is not None:
                scr.keypad(False)
                scr.erase()
                scr.refresh()
            self._cursor(True)
            curses.noraw()
            curses.echo()
        finally:
            curses.endwin()

    @staticmethod
    def _cursor(visible: bool) -> None:
        try:
            curses.curs_set(1 if visible else 0)
        except curses.error:
            pass  # terminal has no cursor visibility control


class TerminalRenderer(Renderer):
    def __init__(self, terminal: Terminal, matrix: bool = False,
                 rng: Optional[random.Random] = None,
                 attrs: Optional[Dict[Style, int]] = None):
        self.terminal = terminal
        self.matrix = matrix
        self.rng = rng if rng is not None else random.Random()
        self._attrs = attrs
        self.attrs: Dict[Style, int] = {}
        self.area: Optional[Area] = None

    def open(self, area: Area) -> None:
        assert self.terminal.screen is not None, "Terminal not entered"
        self.area = area
        self.attrs = self._attrs if self._attrs is not None else self.terminal.style_attrs()

    def draw(self, frame: Sequence[Glyph]) -> None:
        assert self.area is not None, "Renderer not opened"
        scr = self.terminal.screen
        scr.erase()
        for (x, y), char, style in frame:
            if self.matrix and style in (Style.HEAD, Style.BODY):
                char = self.rng.choice(MATRIX_GLYPHS)
            scr.addstr(y, x, char, self.attrs[style])
        # park the cursor on the far corner of the area, not on the last glyph
        scr.move(self.area.end.y, self.area.end.x)
        scr.refresh()

    def close(self) -> None:
        # the Terminal context restores the screen
        self.area = None
