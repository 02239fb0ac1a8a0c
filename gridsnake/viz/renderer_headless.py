# gridsnake/viz/renderer_headless.py
from __future__ import annotations
from typing import List, Optional, Sequence
from gridsnake.core.area import Area
from gridsnake.core.interfaces import Glyph
from .render_iface import Renderer

class HeadlessRenderer(Renderer):
    """Keeps every frame in memory; nothing is drawn."""
    def __init__(self):
        self.area: Optional[Area] = None
        self.frames: List[List[Glyph]] = []
        self.closed = False

    def open(self, area: Area) -> None:
        self.area = area
        self.frames = []
        self.closed = False

    def draw(self, frame: Sequence[Glyph]) -> None:
        assert self.area is not None, "Renderer not opened"
        self.frames.append(list(frame))

    def close(self) -> None:
        self.closed = True

    def text(self, index: int = -1) -> List[str]:
        """Rows of the area (border included) for one stored frame; '.' is empty."""
        assert self.area is not None, "Renderer not opened"
        x0, y0 = self.area.start
        xn, yn = self.area.end
        grid = [["." for _ in range(x0, xn + 1)] for _ in range(y0, yn + 1)]
        for cell, char, _ in self.frames[index]:
            grid[cell.y - y0][cell.x - x0] = char if char != " " else "#"
        return ["".join(row) for row in grid]
