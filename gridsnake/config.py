# gridsnake/config.py
from dataclasses import dataclass, replace
from typing import Optional, Literal, Tuple

@dataclass(frozen=True, slots=True)
class AppConfig:
    # screen / area
    cols: int = 80                       # used when the size isn't read from a terminal
    rows: int = 24
    area_fraction: float = 0.25          # quarter margin on each side
    area_inset: Optional[int] = None     # if set, overrides area_fraction

    # gameplay
    seed: Optional[int] = None
    seed_cell: Optional[Tuple[int, int]] = None   # None -> one cell inside the top-left corner
    start_direction: str = "down"
    food_count: int = 1
    allow_reversal: bool = False
    max_spawn_attempts: int = 64

    # pacing (per tick: bounded input wait, then a fixed sleep)
    poll_ms: int = 300
    sleep_ms: int = 50
    max_ticks: Optional[int] = None

    # render
    backend: Literal["terminal", "pygame", "headless"] = "terminal"
    matrix_glyphs: bool = True
    render_cell: int = 16
    render_title: str = "Snake"

    # logging
    log_path: Optional[str] = None


    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
