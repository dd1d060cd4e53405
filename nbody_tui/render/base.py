"""Base renderer interface."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional
from nbody_tui.render.keys import KeyEvent

if TYPE_CHECKING:
    from nbody_tui.simulations.engine import Simulation


class Canvas(ABC):
    """Drawing surface handed to Simulatable.canvas_render."""

    @abstractmethod
    def print(self, x: float, y: float, glyph: str, color: str):
        """Draw ``glyph`` at world coordinates (x, y)."""
        pass


class Renderer(ABC):
    """Abstract base class for renderers driven by the engine loop."""

    @abstractmethod
    def draw(self, simulation: "Simulation"):
        """Render one frame from the engine's read-only view.

        Args:
            simulation: Engine exposing the active simulatable, fps and logs
        """
        pass

    @abstractmethod
    def poll(self, timeout: float) -> Optional[KeyEvent]:
        """Wait up to ``timeout`` seconds for a key press.

        Returns:
            The key, or None if the wait timed out
        """
        pass

    @abstractmethod
    def close(self):
        """Release the output device."""
        pass
