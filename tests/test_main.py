import pytest

from gridsnake.config import AppConfig
from gridsnake import main as cli

def test_defaults_round_trip_into_config():
    cfg = cli.config_from_args(cli.parse_args([]))
    assert cfg == AppConfig()

def test_flags_override_config():
    cfg = cli.config_from_args(cli.parse_args([
        "headless", "--seed", "4", "--area-inset", "2", "--direction", "left",
        "--allow-reversal", "--plain", "--max-ticks", "10", "--food", "3",
    ]))
    assert cfg.backend == "headless"
    assert cfg.seed == 4 and cfg.area_inset == 2
    assert cfg.start_direction == "left"
    assert cfg.allow_reversal and not cfg.matrix_glyphs
    assert cfg.max_ticks == 10 and cfg.food_count == 3

def test_unknown_backend_is_rejected():
    with pytest.raises(SystemExit):
        cli.parse_args(["vga"])

def test_config_is_frozen():
    cfg = AppConfig()
    with pytest.raises(Exception):
        cfg.seed = 3
    assert cfg.with_(seed=3).seed == 3 and cfg.seed is None

def test_headless_entry_point(capsys):
    cli.main(["headless", "--seed", "2", "--max-ticks", "3"])
    out = capsys.readouterr().out
    assert "ticks=3" in out and "reason=quit" in out
