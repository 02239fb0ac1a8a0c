# gridsnake/viz/renderer_colors.py
from gridsnake.core.interfaces import Style

# pygame RGB
BG   = (12, 12, 12)
HEAD = (235, 235, 235)
BODY = (20, 140, 60)
WALL = (190, 40, 190)
FOOD = (250, 250, 250)

RGB = {Style.HEAD: HEAD, Style.BODY: BODY, Style.WALL: WALL, Style.FOOD: FOOD}

# half-width katakana U+FF66..U+FF9D for the "matrix" body
MATRIX_GLYPHS = [chr(n) for n in range(0xFF66, 0xFF9E)]
