"""Driving statistics recorded while a robot moves.

A robot reports its speed every fixed update. The telemetry samples at most
once every 10 ms, keeps track of the top speed, the top acceleration and how
quickly the top speed was reached, and hands each value to the callbacks
that are set.
"""

from __future__ import annotations

from typing import Callable, Optional

SAMPLE_INTERVAL_MS = 10
EPSILON = 0.01

FloatCallback = Optional[Callable[[float], None]]
IntCallback = Optional[Callable[[int], None]]


class BotTelemetry:
    """Speed and acceleration statistics of a robot, sampled every 10 ms.

    Callbacks are plain attributes; set any of them to a callable to be told
    about a value at each sample. They are called in this order: forward
    acceleration, top speed, forward speed, time to top speed, top speed
    acceleration, top acceleration and finally time moving.
    """

    def __init__(self) -> None:
        self.on_forward_acceleration_changed: FloatCallback = None
        self.on_top_speed_changed: FloatCallback = None
        self.on_forward_speed_changed: FloatCallback = None
        self.on_time_to_top_speed_changed: FloatCallback = None
        self.on_top_speed_acceleration_changed: FloatCallback = None
        self.on_top_acceleration_changed: FloatCallback = None
        self.on_time_moving_changed: IntCallback = None

        self.top_speed = 0.0
        self.top_acceleration = 0.0
        self.time_to_top_speed = 0.0
        self.top_speed_acceleration = 0.0
        self.forward_speed = 0.0
        self.forward_acceleration = 0.0

        self._last_fwd_stand_still_time = 0
        self._last_rot_stand_still_time = 0
        self._last_sample_time = 0
        self._was_at_top_speed = False
        self._was_at_stand_still = False
        self._was_at_rot_stand_still = False

    def update(
        self, milliseconds: int, forward_speed: float, angular_speed: float
    ) -> bool:
        """Feed the current time and speeds; return True if a sample was taken."""
        elapsed = milliseconds - self._last_sample_time
        if elapsed <= SAMPLE_INTERVAL_MS:
            return False

        new_top_speed = False
        if abs(forward_speed) > EPSILON + abs(self.top_speed):
            new_top_speed = True
            self.top_speed = abs(forward_speed)
        if abs(forward_speed) < EPSILON / 10.0:
            self._last_fwd_stand_still_time = milliseconds
            self._was_at_stand_still = True

        at_top_speed = (
            abs(forward_speed - self.top_speed) < EPSILON and forward_speed > EPSILON
        )
        just_reached_top_speed = at_top_speed and not self._was_at_top_speed
        self._was_at_top_speed = at_top_speed

        if new_top_speed or (just_reached_top_speed and self._was_at_stand_still):
            self.time_to_top_speed = (
                milliseconds - self._last_fwd_stand_still_time
            ) / 1000.0
            if self.time_to_top_speed:
                self.top_speed_acceleration = forward_speed / self.time_to_top_speed
            else:
                self.top_speed_acceleration = float("inf")
            self._was_at_stand_still = False

        acceleration = 1000.0 * (forward_speed - self.forward_speed) / elapsed
        if acceleration > 0 and acceleration > EPSILON + self.top_acceleration:
            self.top_acceleration = abs(acceleration)
        self.forward_acceleration = acceleration

        for callback, value in (
            (self.on_forward_acceleration_changed, acceleration),
            (self.on_top_speed_changed, self.top_speed),
            (self.on_forward_speed_changed, forward_speed),
            (self.on_time_to_top_speed_changed, self.time_to_top_speed),
            (self.on_top_speed_acceleration_changed, self.top_speed_acceleration),
            (self.on_top_acceleration_changed, self.top_acceleration),
        ):
            if callback is not None:
                callback(value)

        if self.on_time_moving_changed is not None:
            # Angular speed is also non-zero when driving forward.
            is_moving = abs(angular_speed) > EPSILON / 1000
            if is_moving:
                if self._was_at_rot_stand_still:
                    self._last_rot_stand_still_time = milliseconds
                    self._was_at_rot_stand_still = False
                self.on_time_moving_changed(
                    milliseconds - self._last_rot_stand_still_time
                )
            else:
                self._was_at_rot_stand_still = True

        self.forward_speed = forward_speed
        self._last_sample_time = milliseconds
        return True