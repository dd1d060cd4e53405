"""Abstract base class for numerical integrators."""

from abc import ABC, abstractmethod
from typing import Tuple
import numpy as np


class Integrator(ABC):
    """Abstract interface for integrators over whole state arrays."""

    @abstractmethod
    def step(self, positions: np.ndarray, velocities: np.ndarray, masses: np.ndarray,
             forces: np.ndarray, dt: float, drag: float = 1.0) -> Tuple[np.ndarray, np.ndarray]:
        """Perform one integration step.

        Args:
            positions: Current positions, shape (n, 2)
            velocities: Current velocities, shape (n, 2)
            masses: Masses, shape (n,); all strictly positive
            forces: Accumulated forces, shape (n, 2)
            dt: Time step
            drag: Multiplicative velocity decay applied after the step

        Returns:
            Tuple of (new_positions, new_velocities)
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this integrator."""
        pass

    @property
    @abstractmethod
    def order(self) -> int:
        """Return the order of accuracy."""
        pass
