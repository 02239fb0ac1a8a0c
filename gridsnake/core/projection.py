# gridsnake/core/projection.py
from __future__ import annotations
from typing import Dict, List
from .interfaces import Glyph, Snapshot, Style

GLYPHS: Dict[Style, str] = {
    Style.HEAD: "@",
    Style.BODY: "o",
    Style.WALL: " ",
    Style.FOOD: "$",
}


def project(s: Snapshot) -> List[Glyph]:
    """Cells to draw for one tick: body, then wall, then food."""
    frame: List[Glyph] = []
    for i, c in enumerate(s.body):
        style = Style.HEAD if i == 0 else Style.BODY
        frame.append(Glyph(c, GLYPHS[style], style))
    frame += [Glyph(c, GLYPHS[Style.WALL], Style.WALL) for c in s.area.perimeter()]
    frame += [Glyph(c, GLYPHS[Style.FOOD], Style.FOOD) for c in s.food]
    return frame
