# gridsnake/viz/render_iface.py
from __future__ import annotations
from typing import Literal, Protocol, Sequence, Union
from gridsnake.core.area import Area
from gridsnake.core.interfaces import Direction, Glyph

QUIT = "quit"
Key = Union[Direction, Literal["quit"], None]

class Renderer(Protocol):
    def open(self, area: Area) -> None: ...
    def draw(self, frame: Sequence[Glyph]) -> None: ...
    def close(self) -> None: ...

class InputSource(Protocol):
    def poll(self, timeout_ms: int) -> Key:
        """Wait at most ``timeout_ms`` for one key; None if nothing usable arrived."""
        ...
