"""Simulation engine, the Simulatable contract, and concrete scenarios."""

from nbody_tui.simulations.base import InfoLine, Simulatable
from nbody_tui.simulations.engine import Simulation
from nbody_tui.simulations.nbody import NBody
from nbody_tui.simulations.settings import Setting, SettingsPanel, LinearSetting, ScaleSetting

__all__ = [
    "InfoLine",
    "Simulatable",
    "Simulation",
    "NBody",
    "Setting",
    "SettingsPanel",
    "LinearSetting",
    "ScaleSetting",
]
