import argparse

from gridsnake.config import AppConfig
from gridsnake.runners.run_snake import BACKENDS, main as run_snake


def parse_args(argv=None):
    d = AppConfig()
    p = argparse.ArgumentParser(prog="gridsnake")
    p.add_argument("backend", nargs="?", default=d.backend, choices=sorted(BACKENDS))
    p.add_argument("--seed", type=int, default=d.seed)
    p.add_argument("--cols", type=int, default=d.cols)
    p.add_argument("--rows", type=int, default=d.rows)
    p.add_argument("--area-fraction", type=float, default=d.area_fraction)
    p.add_argument("--area-inset", type=int, default=d.area_inset)
    p.add_argument("--direction", choices=["up", "down", "left", "right"], default=d.start_direction)
    p.add_argument("--food", type=int, default=d.food_count)
    p.add_argument("--allow-reversal", action="store_true")
    p.add_argument("--poll-ms", type=int, default=d.poll_ms)
    p.add_argument("--sleep-ms", type=int, default=d.sleep_ms)
    p.add_argument("--max-ticks", type=int, default=d.max_ticks)
    p.add_argument("--plain", action="store_true", help="plain body glyphs instead of katakana")
    p.add_argument("--cell-px", type=int, default=d.render_cell)
    p.add_argument("--log", dest="log_path", default=d.log_path, help="append a CSV row per session")
    return p.parse_args(argv)


def config_from_args(args) -> AppConfig:
    return AppConfig().with_(
        backend=args.backend,
        seed=args.seed,
        cols=args.cols,
        rows=args.rows,
        area_fraction=args.area_fraction,
        area_inset=args.area_inset,
        start_direction=args.direction,
        food_count=args.food,
        allow_reversal=args.allow_reversal,
        poll_ms=args.poll_ms,
        sleep_ms=args.sleep_ms,
        max_ticks=args.max_ticks,
        matrix_glyphs=not args.plain,
        render_cell=args.cell_px,
        log_path=args.log_path,
    )


def main(argv=None):
    run_snake(config_from_args(parse_args(argv)))


if __name__ == "__main__":
    main()
