# gridsnake/viz/renderer_pygame.py
from __future__ import annotations
import pygame as pg
from typing import Optional, Sequence
from gridsnake.config import AppConfig
from gridsnake.core.area import Area
from gridsnake.core.interfaces import Glyph
from .render_iface import Renderer
import gridsnake.viz.renderer_colors as theme

class PygameRenderer(Renderer):
    """Draws the frame into a window, one ``render_cell`` square per cell.

    The window covers the area only; the area's top-left wall cell is pixel (0, 0).
    """
    def __init__(self, cfg: AppConfig):
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg
        self.cell = cfg.render_cell
        self.area: Optional[Area] = None
        self.surf: Optional[pg.Surface] = None
        self._auto_flip = True

    def open(self, area: Area) -> None:
        self.area = area
        w = (area.end.x - area.start.x + 1) * self.cell
        h = (area.end.y - area.start.y + 1) * self.cell
        pg.init()
        pg.display.set_caption(self.cfg.render_title)
        self.surf = pg.display.set_mode((w, h))
        self._auto_flip = True

    def attach_surface(self, surface: pg.Surface, area: Area) -> None:
        """Draw into a caller-owned surface instead of a window (no flip)."""
        if not pg.get_init():
            pg.init()
        self.area = area
        self.surf = surface
        self._auto_flip = False

    def draw(self, frame: Sequence[Glyph]) -> None:
        assert self.surf is not None, "Renderer not opened"
        assert self.area is not None
        c = self.cell
        x0, y0 = self.area.start
        self.surf.fill(theme.BG)
        for (x, y), _, style in frame:
            pg.draw.rect(self.surf, theme.RGB[style], pg.Rect((x - x0) * c, (y - y0) * c, c, c))
        if self._auto_flip:
            pg.display.flip()

    def close(self) -> None:
        try:
            if self._auto_flip:
                pg.quit()
        finally:
            self.surf = None
            self.area = None
