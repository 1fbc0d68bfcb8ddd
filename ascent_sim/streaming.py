"""
Ascent Kernel - Streaming Driver

Real-time 3D ascent for interactive consumers. The caller owns the loop:
it holds a StreamingTrajectory and calls it once per frame. Each call
performs at most one integration step, gated by a minimum wall-clock
interval, and hands the resulting FlightSample to the progress callback.

There is no thread or timer; dropping the handle cancels the run.
"""

import logging
import time
from typing import Callable, Optional

from . import constants as C
from .integrators import step_trajectory
from .state import State, create_launch_state
from .types import FlightSample
from .validation import check_config

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[FlightSample], None]


def _perf_counter_ms() -> float:
    return time.perf_counter() * 1000.0


class StreamingTrajectory:
    """
    Step handle of a streamed 3D run.

    Steps t = start .. end inclusive, one per admitted call. A call that
    arrives less than min_interval_ms after the previous step, or after the
    handle was created, does nothing.

    Attributes:
        config: VehicleConfig of the run
        state: Current kinematic state
        steps: Number of steps performed so far
        done: True once the final step has been taken
    """

    def __init__(self, config, on_progress: ProgressCallback,
                 clock: Optional[Callable[[], float]] = None,
                 min_interval_ms: float = C.STREAM_MIN_INTERVAL_MS):
        """
        Args:
            config: VehicleConfig
            on_progress: Called with each FlightSample
            clock: Monotonic clock returning milliseconds
            min_interval_ms: Minimum wall-clock gap between two steps

        Raises:
            InvalidConfiguration: if the configuration is not valid
        """
        check_config(config)
        self.config = config
        self.on_progress = on_progress
        self.clock = clock or _perf_counter_ms
        self.min_interval_ms = min_interval_ms

        self.state: State = create_launch_state(config)
        self.steps = 0
        self.done = False
        self._last_step_ms = self.clock()

        logger.info(f"Streaming run armed: start={config.start}s, end={config.end}s")

    def advance(self) -> bool:
        """
        Perform one step if the pacing gate admits it.

        Returns:
            True while work remains, False once the run has finished
        """
        if self.done:
            return False

        now = self.clock()
        if now - self._last_step_ms < self.min_interval_ms:
            return True
        self._last_step_ms = now

        self.state, sample = step_trajectory(self.state, self.config)
        self.steps += 1
        self.on_progress(sample)

        if self.state.t > self.config.end:
            self.done = True
            logger.info(f"Streaming run complete: {self.steps} steps")
            return False
        return True

    def __call__(self) -> bool:
        return self.advance()


def run_realtime(config, on_progress: ProgressCallback,
                 frame_interval: float = C.FRAME_INTERVAL) -> int:
    """
    Drive a StreamingTrajectory from a simple frame loop.

    Sleeps frame_interval seconds between frames, like a display refresh.

    Returns:
        Number of steps performed
    """
    stream = StreamingTrajectory(config, on_progress)
    while stream():
        time.sleep(frame_interval)
    return stream.steps
