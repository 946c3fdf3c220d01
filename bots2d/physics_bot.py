"""A test bot for trying out the physics dynamics directly.

Four wheels are driven by a fixed DC-motor model. The bot records its
forward speed, the top speed reached and the best acceleration up to that
top speed.
"""

from __future__ import annotations

import math
from typing import Callable, NamedTuple, Optional

SAMPLE_INTERVAL_MS = 10
EPSILON = 0.001
NEW_TOP_SPEED_MARGIN = 0.01

WHEEL_DIAMETER = 0.03
VOLTAGE_IN_CONSTANT = 0.00528
ANGULAR_SPEED_CONSTANT = 0.00178
WHEEL_MASS_SHARE = 0.2

FloatCallback = Optional[Callable[[float], None]]


def _rate(numerator: float, elapsed_ms: int) -> float:
    """numerator per second over an interval in milliseconds."""
    if elapsed_ms:
        return 1000.0 * numerator / elapsed_ms
    return math.inf if numerator else math.nan


class PhysicsBotTelemetry:
    """Speed statistics of the physics bot, sampled at most every 10 ms.

    Callbacks are plain attributes, called at each sample in this order:
    forward speed, top speed, acceleration to top speed, forward acceleration.
    """

    def __init__(self) -> None:
        self.on_forward_speed_changed: FloatCallback = None
        self.on_top_speed_changed: FloatCallback = None
        self.on_acceleration_to_top_speed_changed: FloatCallback = None
        self.on_forward_acceleration_changed: FloatCallback = None

        self.forward_speed = 0.0
        self.forward_acceleration = 0.0
        self.top_speed = 0.0
        self.acceleration_to_top_speed = 0.0
        self.time_to_top_speed = 0.0

        self._acceleration_recorded_at_speed = 0.0
        self._last_stand_still_time = 0
        self._last_sample_time = 0

    def update(self, milliseconds: int, forward_speed: float) -> bool:
        """Feed the current time and forward speed; return True if sampled."""
        elapsed = milliseconds - self._last_sample_time
        if elapsed <= SAMPLE_INTERVAL_MS:
            return False

        speed = abs(forward_speed)
        if speed > EPSILON + abs(self.top_speed):
            self.top_speed = speed
        if speed < EPSILON / 10.0:
            self._last_stand_still_time = milliseconds

        if abs(forward_speed - self.top_speed) < EPSILON:
            since_stand_still = milliseconds - self._last_stand_still_time
            acceleration = _rate(speed, since_stand_still)
            at_new_top_speed = speed > (
                abs(self._acceleration_recorded_at_speed) + NEW_TOP_SPEED_MARGIN
            )
            if at_new_top_speed:
                self.acceleration_to_top_speed = acceleration
                self.time_to_top_speed = since_stand_still / 1000.0
                self._acceleration_recorded_at_speed = speed
            elif acceleration > self.acceleration_to_top_speed:
                self.acceleration_to_top_speed = acceleration
                self.time_to_top_speed = since_stand_still / 1000.0

        forward_acceleration = _rate(forward_speed - self.forward_speed, elapsed)
        for callback, value in (
            (self.on_forward_speed_changed, forward_speed),
            (self.on_top_speed_changed, self.top_speed),
            (self.on_acceleration_to_top_speed_changed, self.acceleration_to_top_speed),
            (self.on_forward_acceleration_changed, forward_acceleration),
        ):
            if callback is not None:
                callback(value)

        self.forward_acceleration = forward_acceleration
        self.forward_speed = forward_speed
        self._last_sample_time = milliseconds
        return True

    def reset(self) -> None:
        """Forget the recorded top speed and the best acceleration to it."""
        self.top_speed = 0.0
        self.acceleration_to_top_speed = 0.0
        self._acceleration_recorded_at_speed = 0.0
        self.time_to_top_speed = 0.0


def physics_bot_motor_force(forward_speed: float, voltage: float) -> float:
    """Force a physics bot wheel applies along its forward normal."""
    angular_speed = forward_speed / (3.14 * WHEEL_DIAMETER)
    torque = VOLTAGE_IN_CONSTANT * voltage - ANGULAR_SPEED_CONSTANT * angular_speed
    # t = r * F  =>  F = t / r
    return torque / (WHEEL_DIAMETER / 2)


class MassSplit(NamedTuple):
    body_mass: float
    wheel_mass: float


def split_total_mass(mass: float, wheel_count: int = 4) -> MassSplit:
    """Split a total mass: 20% over the wheels, the rest to the body."""
    if mass <= 0:
        raise ValueError(f"mass must be positive, got {mass}")
    if wheel_count <= 0:
        raise ValueError(f"wheel count must be positive, got {wheel_count}")
    wheel_mass = (mass * WHEEL_MASS_SHARE) / wheel_count
    return MassSplit(body_mass=mass - wheel_mass * wheel_count, wheel_mass=wheel_mass)