# gridsnake/runners/run_snake.py
from __future__ import annotations
import random
import time
from typing import Callable, Optional
from gridsnake.config import AppConfig
from gridsnake.core.area import Area
from gridsnake.core.engine import TickEngine
from gridsnake.core.interfaces import Snapshot
from gridsnake.core.projection import project
from gridsnake.logging import CSVLogger, NullLogger, Logger, SESSION_KEYS, make_session_logger
from gridsnake.viz.render_iface import InputSource, Renderer, QUIT


def play(
    engine: TickEngine,
    renderer: Renderer,
    keyboard: InputSource,
    cfg: AppConfig,
    *,
    sleep: Callable[[float], None] = time.sleep,
) -> Snapshot:
    """Run one session until the engine terminates, the player quits or
    ``cfg.max_ticks`` is reached. The renderer is closed on every exit path."""
    try:
        renderer.open(engine.state.area)
        renderer.draw(project(engine.snapshot()))
        while engine.running:
            step = engine.tick()
            renderer.draw(step.frame)
            if step.terminated:
                break
            if cfg.max_ticks is not None and step.snapshot.tick >= cfg.max_ticks:
                break

            key = keyboard.poll(cfg.poll_ms)
            if key == QUIT:
                break
            if key is not None:
                engine.steer(key)
            sleep(cfg.sleep_ms / 1000.0)
    finally:
        renderer.close()
    return engine.snapshot()


def _area_for(cfg: AppConfig, cols: int, rows: int) -> Area:
    return Area.from_screen(cols, rows, inset=cfg.area_inset, fraction=cfg.area_fraction)


def _run_terminal(cfg: AppConfig) -> Snapshot:
    from gridsnake.viz.keyboard import TerminalKeyboard
    from gridsnake.viz.renderer_terminal import Terminal, TerminalRenderer

    with Terminal() as term:
        cols, rows = term.size()
        engine = TickEngine.from_config(cfg, _area_for(cfg, cols, rows))
        renderer = TerminalRenderer(term, matrix=cfg.matrix_glyphs, rng=random.Random(cfg.seed))
        return play(engine, renderer, TerminalKeyboard(term), cfg)


def _run_pygame(cfg: AppConfig) -> Snapshot:
    from gridsnake.viz.keyboard import PygameKeyboard
    from gridsnake.viz.renderer_pygame import PygameRenderer

    engine = TickEngine.from_config(cfg, _area_for(cfg, cfg.cols, cfg.rows))
    return play(engine, PygameRenderer(cfg), PygameKeyboard(), cfg)


class _NoKeys:
    def poll(self, timeout_ms: int):
        return None


def _run_headless(cfg: AppConfig) -> Snapshot:
    from gridsnake.viz.renderer_headless import HeadlessRenderer

    engine = TickEngine.from_config(cfg, _area_for(cfg, cfg.cols, cfg.rows))
    return play(engine, HeadlessRenderer(), _NoKeys(), cfg, sleep=lambda _s: None)


BACKENDS = {
    "terminal": _run_terminal,
    "pygame": _run_pygame,
    "headless": _run_headless,
}


def main(cfg: Optional[AppConfig] = None) -> Snapshot:
    cfg = cfg or AppConfig()
    if cfg.backend not in BACKENDS:
        raise ValueError(f"unknown backend {cfg.backend!r} (choose from {sorted(BACKENDS)})")

    logger: Logger = CSVLogger(cfg.log_path, SESSION_KEYS) if cfg.log_path else NullLogger()
    on_end = make_session_logger(logger)
    try:
        final = BACKENDS[cfg.backend](cfg)
        on_end(1, final)
    finally:
        logger.close()

    # terminal is restored by now
    reason = final.reason.value if final.reason else "quit"
    print(f"[session] ticks={final.tick} length={len(final.body)} reason={reason}")
    return final
