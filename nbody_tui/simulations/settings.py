"""Live-tunable simulation settings and the panel that navigates them."""

from abc import ABC, abstractmethod
from typing import List, Sequence, Tuple, Union

Number = Union[int, float]


class Setting(ABC):
    """Abstract interface for a named numeric control.

    Settings do no bounds checking; each concrete step decides what values
    it allows.
    """

    def __init__(self, label: str, value: Number, fmt: str = "{}"):
        """Initialize setting.

        Args:
            label: Text shown in the settings panel
            value: Initial value
            fmt: str.format pattern for the displayed value
        """
        self.label = label
        self.value = value
        self.fmt = fmt

    def text(self) -> str:
        """Return the formatted current value."""
        return self.fmt.format(self.value)

    @abstractmethod
    def increment(self):
        """Step the value up."""
        pass

    @abstractmethod
    def decrement(self):
        """Step the value down."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.label!r}, {self.value!r})"


class LinearSetting(Setting):
    """Setting stepped by a fixed additive delta."""

    def __init__(self, label: str, value: Number, step: Number, fmt: str = "{}"):
        super().__init__(label, value, fmt)
        self.step = step

    def increment(self):
        self.value += self.step

    def decrement(self):
        self.value -= self.step


class ScaleSetting(Setting):
    """Setting stepped by a multiplicative factor."""

    def __init__(self, label: str, value: float, factor: float, fmt: str = "{}"):
        if factor == 0:
            raise ValueError("ScaleSetting factor must be non-zero")
        super().__init__(label, value, fmt)
        self.factor = factor

    def increment(self):
        self.value *= self.factor

    def decrement(self):
        self.value /= self.factor


def speed_setting(value: int = 3) -> LinearSetting:
    """Step length per update. Negative values run time backwards."""
    return LinearSetting("Speed:", int(value), 1, "{}")


def gravity_setting(value: float = 1e2) -> ScaleSetting:
    """Gravitational constant, stepped by decades."""
    return ScaleSetting("Force (G):", float(value), 10.0, "{:.0f}")


def drag_setting(value: float = 0.99) -> LinearSetting:
    """Velocity decay per step. Values above 1 pump energy in."""
    return LinearSetting("Drag:", float(value), 0.01, "{:.2f}")


class SettingsPanel:
    """Ordered settings with a single selected entry.

    The panel owns its settings; physics code reads them back by index so
    navigation and simulation always see the same value.
    """

    def __init__(self, settings: Sequence[Setting] = ()):
        self.settings: List[Setting] = list(settings)
        self.selected = 0

    def __len__(self) -> int:
        return len(self.settings)

    def __getitem__(self, index: int) -> Setting:
        return self.settings[index]

    def up(self):
        if self.selected > 0:
            self.selected -= 1

    def down(self):
        if self.selected < len(self.settings) - 1:
            self.selected += 1

    def left(self):
        if self.settings:
            self.settings[self.selected].decrement()

    def right(self):
        if self.settings:
            self.settings[self.selected].increment()

    def render(self) -> List[Tuple[str, bool]]:
        """Return (line, is_selected) for every setting in order."""
        return [
            (f"{s.label}\t{s.text()}", i == self.selected)
            for i, s in enumerate(self.settings)
        ]
