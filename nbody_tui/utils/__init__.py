"""Utility functions for configuration, seeding, and log capture."""

from nbody_tui.utils.config import load_config, save_config, Config
from nbody_tui.utils.logbuffer import LogBuffer, capture_logs
from nbody_tui.utils.reproducibility import set_all_seeds

__all__ = ["load_config", "save_config", "Config", "LogBuffer", "capture_logs", "set_all_seeds"]
