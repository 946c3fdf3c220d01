"""A wheel with a built-in DC motor.

The motor is modelled with basic DC-motor equations: the applied torque is
proportional to the input voltage and reduced by back EMF as the wheel spins
up. Sideways slipping is countered by an impulse proportional to the lateral
velocity. Only the top-view model is supported.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum

SPEED_ANIMATION_THRESHOLD = 0.02


class Orientation(Enum):
    LEFT = "left"
    RIGHT = "right"


class WheelTextureType(Enum):
    NONE = "none"
    GREEN = "green"
    ORANGE = "orange"
    RED = "red"


class AnimationState(Enum):
    """Sprite playback direction; a wheel rolling forward plays its sprite backward."""

    STOPPED = "stopped"
    FORWARD = "forward"
    BACKWARD = "backward"


@dataclass
class WheelMotorSpec:
    """Physical and electrical parameters of a wheel motor."""

    # (Torque constant * voltage constant) / motor resistance; sets top speed.
    voltage_in_constant: float = 0.00628
    # Torque constant / motor resistance; sets acceleration.
    angular_speed_constant: float = 0.00178
    max_voltage: float = 6.0
    # Coulomb friction in all directions, mimicking motor loss.
    friction_coefficient: float = 0.1
    # Larger value means more sideways friction and less skidding.
    sideway_friction_constant: float = 100.0
    width: float = 0.0
    diameter: float = 0.0
    wheel_mass: float = 0.0
    # Mass the attached body adds on the wheel.
    loaded_mass: float = 0.0
    texture_type: WheelTextureType = WheelTextureType.NONE


_TEXTURES = {
    (WheelTextureType.ORANGE, Orientation.LEFT): "wheel_sprite_left_orange.png",
    (WheelTextureType.ORANGE, Orientation.RIGHT): "wheel_sprite_right_orange.png",
    (WheelTextureType.GREEN, Orientation.LEFT): "wheel_sprite_left_green.png",
    (WheelTextureType.GREEN, Orientation.RIGHT): "wheel_sprite_right_green.png",
    (WheelTextureType.RED, Orientation.LEFT): "wheel_sprite_left_red.png",
    (WheelTextureType.RED, Orientation.RIGHT): "wheel_sprite_right_red.png",
}


def texture_name(orientation: Orientation, texture_type: WheelTextureType) -> str:
    """Sprite file name of a wheel; a wheel without texture has none."""
    try:
        return _TEXTURES[(texture_type, orientation)]
    except KeyError:
        raise ValueError(f"no texture for {texture_type} wheel") from None


class _NonNegativeSpecField:
    """A spec field exposed on the motor that refuses negative values."""

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(self, motor, owner=None):
        if motor is None:
            return self
        return getattr(motor.spec, self.name)

    def __set__(self, motor, value):
        if value < 0:
            raise ValueError(f"{self.name} must not be negative, got {value}")
        setattr(motor.spec, self.name, value)


class WheelMotor:
    """A wheel motor driven by an input voltage."""

    wheel_mass = _NonNegativeSpecField()
    loaded_mass = _NonNegativeSpecField()
    max_voltage = _NonNegativeSpecField()
    angular_speed_constant = _NonNegativeSpecField()
    voltage_in_constant = _NonNegativeSpecField()

    def __init__(self, spec: WheelMotorSpec) -> None:
        if spec.max_voltage <= 0:
            raise ValueError("max_voltage must be positive")
        self.spec = dataclasses.replace(spec)
        self._voltage_in = 0.0
        self.enabled = True

    @property
    def voltage_in(self) -> float:
        return self._voltage_in

    @voltage_in.setter
    def voltage_in(self, voltage: float) -> None:
        if abs(voltage) > self.spec.max_voltage:
            raise ValueError(
                f"voltage {voltage} exceeds max voltage {self.spec.max_voltage}"
            )
        self._voltage_in = voltage

    @property
    def total_mass(self) -> float:
        """Mass of the wheel plus the load it carries."""
        return self.spec.wheel_mass + self.spec.loaded_mass

    def drive_force(self, forward_speed: float) -> float:
        """Force along the wheel's forward normal at the given forward speed."""
        if not self.enabled:
            return 0.0
        diameter = self.spec.diameter
        angular_speed = forward_speed / (3.14 * diameter)
        torque = (
            self.spec.voltage_in_constant * self._voltage_in
            - self.spec.angular_speed_constant * angular_speed
        )
        # t = r * F  =>  F = t / r
        return torque / (diameter / 2)

    def lateral_impulse(
        self, lateral_velocity: tuple[float, float]
    ) -> tuple[float, float]:
        """Impulse cancelling sideways motion; none while the motor is disabled."""
        if not self.enabled:
            return (0.0, 0.0)
        k = self.spec.sideway_friction_constant
        vx, vy = lateral_velocity
        return (-vx * k, -vy * k)

    def animation_state(self, forward_speed: float) -> AnimationState:
        """Sprite direction for the current speed and input voltage."""
        if self.enabled and (
            forward_speed > SPEED_ANIMATION_THRESHOLD or self._voltage_in > 0.0
        ):
            return AnimationState.BACKWARD
        if self.enabled and (
            forward_speed < -SPEED_ANIMATION_THRESHOLD or self._voltage_in < 0.0
        ):
            return AnimationState.FORWARD
        return AnimationState.STOPPED

    def enable(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        self.enabled = False