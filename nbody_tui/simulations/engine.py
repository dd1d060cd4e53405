"""Fixed-cadence update / render / input loop."""

import logging
import time
from typing import Callable, Optional
from nbody_tui.render.base import Renderer
from nbody_tui.render.keys import Key, KeyEvent, PAUSE, QUIT, RESET
from nbody_tui.simulations.base import Simulatable
from nbody_tui.utils.logbuffer import LogBuffer, capture_logs

logger = logging.getLogger(__name__)

# Input poll timeout; doubles as frame pacing (~60 iterations per second)
POLL_TIMEOUT = 0.016
FPS_SMOOTHING = 0.99
LOG_CAPACITY = 100


class Simulation:
    """Main engine controller.

    Owns the exit / reset / pause flags, the rolling log buffer and the
    smoothed FPS estimate, and drives exactly one Simulatable.
    """

    def __init__(
        self,
        simulation: Simulatable,
        paused: bool = True,
        log_buffer: Optional[LogBuffer] = None,
        clock: Callable[[], float] = time.perf_counter,
    ):
        """Initialize engine.

        Args:
            simulation: Active scenario
            paused: Start paused
            log_buffer: Rolling log buffer (capacity 100 if None)
            clock: Monotonic clock in seconds, used for FPS
        """
        self.simulation = simulation
        self.exit = False
        self.reset = False
        self.pause = paused
        self.logger = log_buffer if log_buffer is not None else LogBuffer(LOG_CAPACITY)
        self.fps = 60.0
        self._clock = clock

    def run(self, renderer: Renderer):
        """Run until the quit key is pressed.

        Renderer errors are not caught; the caller restores the terminal.

        Args:
            renderer: Frame output and key source
        """
        with capture_logs(self.logger):
            logger.info("simulation started")
            while not self.exit:
                begin_time = self._clock()
                self.step()
                renderer.draw(self)
                key = renderer.poll(POLL_TIMEOUT)
                if key is not None:
                    self.handle_key_event(key)
                self.update_fps((self._clock() - begin_time) * 1000.0)
            logger.info("simulation stopped")

    def step(self):
        """Apply a pending reset, then update unless paused."""
        if self.reset:
            self.simulation.reset()
            self.reset = False
            logger.info("simulation reset")
        if not self.pause:
            self.simulation.update()

    def update_fps(self, elapsed_ms: float):
        """Fold one frame time into the moving-average FPS estimate."""
        if elapsed_ms <= 0:
            return
        self.fps = self.fps * FPS_SMOOTHING + (1000.0 / elapsed_ms) * (1.0 - FPS_SMOOTHING)

    def handle_key_event(self, key: KeyEvent):
        """Dispatch engine-reserved keys; forward everything else."""
        settings = self.simulation.settings
        if key == QUIT:
            self.exit = True
        elif key == PAUSE:
            self.pause = not self.pause
        elif key == RESET:
            self.reset = True
        elif key == Key.LEFT:
            settings.left()
        elif key == Key.RIGHT:
            settings.right()
        elif key == Key.UP:
            settings.up()
        elif key == Key.DOWN:
            settings.down()
        else:
            self.simulation.handle_key_events(key)

    def recent_logs(self, n: int = 10) -> str:
        """Return the last ``n`` log lines for the logs panel."""
        return self.logger.tail(n)
