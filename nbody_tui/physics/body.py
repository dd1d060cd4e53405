"""Point-mass bodies and their display markers."""

from dataclasses import dataclass
from typing import Optional, Tuple
import numpy as np

PALETTE = ("red", "green", "yellow", "blue", "magenta", "cyan", "gray", "white")

BODY_GLYPH = "☼"
TRAIL_GLYPH = "·"

# Per-axis acceleration limit applied before integration
MAX_ACCELERATION = 0.1


@dataclass(frozen=True)
class Marker:
    """Glyph and color used to draw a body."""
    glyph: str
    color: str


@dataclass
class Body:
    """A simulated point mass.

    Trail markers are bodies with zero mass and zero velocity; they are
    drawn but never take part in force accumulation.
    """
    mass: float
    x: float
    y: float
    dx: float
    dy: float
    marker: Marker

    @classmethod
    def random(cls, index: int, rng: Optional[np.random.Generator] = None) -> "Body":
        """Create a unit-mass body with random position and velocity.

        Args:
            index: Body id, selects the marker color from the palette
            rng: Random generator (a fresh default generator if None)

        Returns:
            New body
        """
        rng = rng if rng is not None else np.random.default_rng()
        return cls(
            mass=1.0,
            x=float(rng.uniform(-50.0, 50.0)),
            y=float(rng.uniform(-50.0, 50.0)),
            dx=float(rng.uniform(-0.1, 0.1)),
            dy=float(rng.uniform(-0.1, 0.1)),
            marker=Marker(BODY_GLYPH, PALETTE[index % len(PALETTE)]),
        )

    def trail(self) -> "Body":
        """Snapshot of the current position as a display-only trail marker."""
        return Body(
            mass=0.0,
            x=self.x,
            y=self.y,
            dx=0.0,
            dy=0.0,
            marker=Marker(TRAIL_GLYPH, self.marker.color),
        )

    @property
    def position(self) -> Tuple[float, float]:
        return self.x, self.y

    @property
    def velocity(self) -> Tuple[float, float]:
        return self.dx, self.dy

    def step(self, force: Tuple[float, float], dt: float, drag: float):
        """Advance this body by one constant-acceleration step.

        Acceleration is clamped per axis to +/- MAX_ACCELERATION, then
        pos += v*t + a*t^2/2, v += a*t, and finally v *= drag.

        Args:
            force: Accumulated force (fx, fy)
            dt: Step length (the live speed setting)
            drag: Multiplicative velocity decay applied after integration
        """
        ax = float(np.clip(force[0] / self.mass, -MAX_ACCELERATION, MAX_ACCELERATION))
        ay = float(np.clip(force[1] / self.mass, -MAX_ACCELERATION, MAX_ACCELERATION))

        self.x += self.dx * dt + 0.5 * ax * dt ** 2
        self.y += self.dy * dt + 0.5 * ay * dt ** 2
        self.dx += ax * dt
        self.dy += ay * dt
        # Space drag
        self.dx *= drag
        self.dy *= drag

    def __str__(self) -> str:
        return (
            f"{self.mass:.0f}kg pos: ({self.x:.2f}, {self.y:.2f}) "
            f"vel: ({self.dx:.2f}, {self.dy:.2f})"
        )
