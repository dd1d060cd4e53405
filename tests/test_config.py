"""Tests for configuration loading and the CLI config merge."""

import json
import pytest
from nbody_tui.cli.main import build_config, build_parser
from nbody_tui.utils.config import Config, load_config, save_config


def test_defaults():
    """Test default configuration values."""
    config = Config().validate()

    assert config.bodies == 3
    assert config.speed == 3
    assert config.gravity == 100.0
    assert config.drag == 0.99
    assert config.softening == 0.0
    assert config.canvas_bounds == (-100.0, 100.0, -100.0, 100.0)
    assert config.paused is True


@pytest.mark.parametrize("suffix", [".json", ".yaml"])
def test_save_load(tmp_path, suffix):
    """Test saving and loading JSON and YAML configs."""
    path = tmp_path / f"config{suffix}"
    config = Config(bodies=5, seed=7, gravity=1000.0, canvas_bounds=(-50, 50, -25, 25))

    save_config(config, str(path))
    loaded = load_config(str(path))

    assert loaded == config


def test_unknown_key_rejected(tmp_path):
    """Test unknown keys raise ValueError."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"bodies": 4, "warp": 9}))

    with pytest.raises(ValueError, match="warp"):
        load_config(str(path))


@pytest.mark.parametrize("changes", [
    {"bodies": -1},
    {"trail_length": 0},
    {"softening": -0.5},
    {"canvas_bounds": (10, -10, -10, 10)},
])
def test_validation(changes):
    """Test out-of-range values are rejected."""
    with pytest.raises(ValueError):
        Config(**changes).validate()


def test_cli_overrides(tmp_path):
    """Test command line options override the config file."""
    path = tmp_path / "config.yaml"
    save_config(Config(bodies=6, drag=0.5), str(path))

    args = build_parser().parse_args(["--config", str(path), "--bodies", "2", "--running", "--seed", "3"])
    config = build_config(args)

    assert config.bodies == 2
    assert config.drag == 0.5
    assert config.seed == 3
    assert config.paused is False


def test_cli_defaults():
    """Test an empty command line gives the default config."""
    args = build_parser().parse_args([])
    assert build_config(args) == Config()
