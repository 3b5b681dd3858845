"""Continuous rotation of theta, driven by an external frame loop."""

from dataclasses import dataclass
from typing import Optional
import math

from .constants import ROTATION_RATE


def advance(theta: float, dt: float, rate: float = ROTATION_RATE) -> float:
    """theta after `dt` seconds of rotation at `rate` radians per second."""
    return theta + dt * rate


def wrap_angle(theta: float) -> float:
    """Map an unbounded angle into [-pi, pi] for a circular control."""
    if not math.isfinite(theta):
        return 0.0
    return math.remainder(theta, 2 * math.pi)


def parse_theta(text: str, current: float) -> float:
    """Typed angle entry; anything unparsable keeps `current`."""
    try:
        value = float(text)
    except ValueError:
        return current
    if math.isnan(value):
        return current
    return value


@dataclass
class Rotator:
    """Start/stop state for automatic rotation.

    The owner calls step() once per frame with the current clock reading.
    Only the most recent timestamp is kept, so a paused rotator never
    jumps when it resumes and a stopped one leaves theta untouched.
    """
    rate: float = ROTATION_RATE
    running: bool = False
    last_time: Optional[float] = None

    def start(self, now: float):
        self.running = True
        self.last_time = now

    def stop(self):
        self.running = False
        self.last_time = None

    def toggle(self, now: float):
        if self.running:
            self.stop()
        else:
            self.start(now)

    def step(self, theta: float, now: float) -> float:
        if not self.running:
            return theta
        if self.last_time is None:
            self.last_time = now
            return theta
        dt = now - self.last_time
        self.last_time = now
        return advance(theta, dt, self.rate)
