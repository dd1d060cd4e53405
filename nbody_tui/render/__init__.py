"""Presentation layer: renderer interface, key identifiers, and the curses terminal."""

from nbody_tui.render.base import Canvas, Renderer
from nbody_tui.render.keys import Key
from nbody_tui.render.terminal import TerminalRenderer

__all__ = ["Canvas", "Renderer", "Key", "TerminalRenderer"]
