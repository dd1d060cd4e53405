"""Abstract base class for simulations driven by the engine."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, NamedTuple, Optional, Tuple
from nbody_tui.physics.body import Marker
from nbody_tui.render.base import Canvas
from nbody_tui.render.keys import KeyEvent
from nbody_tui.simulations.settings import SettingsPanel

if TYPE_CHECKING:
    from nbody_tui.simulations.engine import Simulation
    from nbody_tui.utils.config import Config


class InfoLine(NamedTuple):
    """One line of the info panel: optional marker then text."""
    marker: Optional[Marker]
    text: str


class Simulatable(ABC):
    """Capability set a scenario provides to the engine.

    The engine holds a single instance and never looks at its concrete
    type. Engine-reserved keys (quit, pause, reset, arrows) never reach
    handle_key_events.
    """

    @classmethod
    @abstractmethod
    def init(cls, config: Optional["Config"] = None) -> "Simulation":
        """Build a fresh scenario wrapped in a ready-to-run engine."""
        pass

    @abstractmethod
    def reset(self):
        """Discard all state and build a new random scenario."""
        pass

    @abstractmethod
    def update(self):
        """Advance the simulation by one step."""
        pass

    @abstractmethod
    def handle_key_events(self, key: KeyEvent):
        """Handle a key the engine did not claim."""
        pass

    @abstractmethod
    def canvas_title(self) -> str:
        pass

    @abstractmethod
    def canvas_bounds(self) -> Tuple[float, float, float, float]:
        """Return (x_min, x_max, y_min, y_max) in world coordinates."""
        pass

    @abstractmethod
    def canvas_render(self, canvas: Canvas):
        """Paint the current state onto ``canvas``."""
        pass

    @abstractmethod
    def info_title(self) -> str:
        pass

    @abstractmethod
    def info_text(self) -> List[InfoLine]:
        pass

    @property
    @abstractmethod
    def settings(self) -> SettingsPanel:
        """Settings panel, shared by navigation and the physics step."""
        pass
