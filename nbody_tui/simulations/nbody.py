"""Naive O(n^2) N-body scenario."""

import logging
from collections import deque
from typing import Deque, List, Optional, Tuple
import numpy as np
from nbody_tui.physics.body import Body
from nbody_tui.physics.centroid import ransac_centroid, recenter
from nbody_tui.physics.forces import advance, compute_forces
from nbody_tui.render.base import Canvas
from nbody_tui.render.keys import KeyEvent
from nbody_tui.simulations.base import InfoLine, Simulatable
from nbody_tui.simulations.engine import Simulation
from nbody_tui.simulations.settings import (
    SettingsPanel,
    drag_setting,
    gravity_setting,
    speed_setting,
)
from nbody_tui.utils.config import Config

logger = logging.getLogger(__name__)

# Settings panel order
SPEED, GRAVITY, DRAG = 0, 1, 2

ADD_BODY = "a"
REMOVE_BODY = "d"
TOGGLE_TRAIL = "t"


class NBody(Simulatable):
    """Gravitating bodies with trails and robust recentering."""

    def __init__(self, config: Optional[Config] = None, rng: Optional[np.random.Generator] = None):
        """Initialize scenario.

        Args:
            config: Scenario configuration (defaults if None)
            rng: Random generator for body placement
        """
        self.config = (config or Config()).validate()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self._settings = SettingsPanel([
            speed_setting(self.config.speed),
            gravity_setting(self.config.gravity),
            drag_setting(self.config.drag),
        ])
        self.show_trail = False
        self.entities: Deque[Body] = deque()
        self.trail: Deque[Body] = deque(maxlen=self.config.trail_length)
        self.id_counter = 0
        self._populate()

    @classmethod
    def init(cls, config: Optional[Config] = None, rng: Optional[np.random.Generator] = None) -> Simulation:
        config = config or Config()
        return Simulation(cls(config, rng), paused=config.paused)

    def _populate(self):
        n = self.config.bodies
        self.entities = deque(Body.random(i, self.rng) for i in range(n))
        self.trail = deque(maxlen=self.config.trail_length)
        self.id_counter = n

    @property
    def speed(self) -> float:
        return self._settings[SPEED].value

    @property
    def gravity(self) -> float:
        return self._settings[GRAVITY].value

    @property
    def drag(self) -> float:
        return self._settings[DRAG].value

    def reset(self):
        """Start over with a new random scenario; settings are kept."""
        self._populate()
        logger.info("reset to %d bodies", len(self.entities))

    def add_body(self) -> Body:
        body = Body.random(self.id_counter, self.rng)
        self.id_counter += 1
        self.entities.append(body)
        logger.info("added body %s", body)
        return body

    def remove_body(self) -> Optional[Body]:
        """Remove the oldest-inserted body, if any."""
        if not self.entities:
            return None
        body = self.entities.popleft()
        logger.info("removed body %s", body)
        return body

    def handle_key_events(self, key: KeyEvent):
        if key == ADD_BODY:
            self.add_body()
        elif key == REMOVE_BODY:
            self.remove_body()
        elif key == TOGGLE_TRAIL:
            self.show_trail = not self.show_trail

    def update(self):
        for body in self.entities:
            self.trail.append(body.trail())

        # 0 or 1 bodies: nothing to attract and nothing to recenter
        if len(self.entities) < 2:
            return

        forces = compute_forces(self.entities, self.gravity, self.config.softening)
        advance(self.entities, forces, float(self.speed), self.drag)

        centroid = ransac_centroid(self.entities, self.config.inlier_radius)
        recenter(self.entities, self.trail, centroid, self.config.recenter_factor)

    def canvas_title(self) -> str:
        return " N-Body Simulation "

    def canvas_bounds(self) -> Tuple[float, float, float, float]:
        return self.config.canvas_bounds

    def canvas_render(self, canvas: Canvas):
        if self.show_trail:
            for marker in self.trail:
                canvas.print(marker.x, marker.y, marker.marker.glyph, marker.marker.color)
        for body in self.entities:
            canvas.print(body.x, body.y, body.marker.glyph, body.marker.color)

    def info_title(self) -> str:
        return " Entity Info "

    def info_text(self) -> List[InfoLine]:
        return [InfoLine(body.marker, str(body)) for body in self.entities]

    @property
    def settings(self) -> SettingsPanel:
        return self._settings
