"""Configuration management."""

import json
import yaml
from typing import Any, Dict, Optional, Tuple
from pathlib import Path
from dataclasses import dataclass, asdict, fields


@dataclass
class Config:
    """Simulation configuration.

    Holds the starting values; the live settings panel takes over once the
    simulation is running.
    """
    # Scenario
    bodies: int = 3
    trail_length: int = 500
    seed: Optional[int] = None

    # Initial setting values
    speed: int = 3
    gravity: float = 100.0
    drag: float = 0.99

    # Physics
    softening: float = 0.0
    inlier_radius: float = 150.0
    recenter_factor: float = 0.1

    # Display
    canvas_bounds: Tuple[float, float, float, float] = (-100.0, 100.0, -100.0, 100.0)
    paused: bool = True

    def __post_init__(self):
        self.canvas_bounds = tuple(float(v) for v in self.canvas_bounds)

    def validate(self) -> "Config":
        """Check value ranges.

        Returns:
            self, for chaining

        Raises:
            ValueError: If a value is out of range
        """
        if self.bodies < 0:
            raise ValueError(f"bodies must be >= 0, got {self.bodies}")
        if self.trail_length <= 0:
            raise ValueError(f"trail_length must be > 0, got {self.trail_length}")
        if self.softening < 0:
            raise ValueError(f"softening must be >= 0, got {self.softening}")
        if self.inlier_radius <= 0:
            raise ValueError(f"inlier_radius must be > 0, got {self.inlier_radius}")
        if len(self.canvas_bounds) != 4:
            raise ValueError(f"canvas_bounds needs 4 values, got {len(self.canvas_bounds)}")
        x_min, x_max, y_min, y_max = self.canvas_bounds
        if x_min >= x_max or y_min >= y_max:
            raise ValueError(f"canvas_bounds must be (x_min, x_max, y_min, y_max), got {self.canvas_bounds}")
        return self

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["canvas_bounds"] = list(self.canvas_bounds)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Build a Config, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {unknown}")
        return cls(**data)


def load_config(config_path: str) -> Config:
    """Load configuration from file.

    Args:
        config_path: Path to config file (.json or .yaml)

    Returns:
        Validated Config object
    """
    config_path = Path(config_path)

    with open(config_path, 'r') as f:
        if config_path.suffix in ('.yaml', '.yml'):
            data = yaml.safe_load(f)
        else:
            data = json.load(f)

    return Config.from_dict(data or {}).validate()


def save_config(config: Config, output_path: str):
    """Save configuration to file.

    Args:
        config: Config object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    data = config.to_dict()

    with open(output_path, 'w') as f:
        if output_path.suffix in ('.yaml', '.yml'):
            yaml.safe_dump(data, f, default_flow_style=False)
        else:
            json.dump(data, f, indent=2)
