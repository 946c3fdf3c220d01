# bots2d

Models for the robots that drive around a 2D top-view simulator. The package
has a DC wheel motor model, speed and acceleration telemetry, the motor model
and telemetry of a four-wheeled physics test bot, and closed, right-angled
line-follower paths turned into quads.

It uses the standard library only. The `test` extra installs pytest for the
tests in `tests/`.

## Modules

### `bots2d.wheel_motor`

- `WheelMotorSpec` is a dataclass of the motor's parameters: voltage-in and
  angular-speed constants, max voltage, friction coefficient, sideways
  friction constant, width, diameter, wheel mass, loaded mass and
  `WheelTextureType`.
- `WheelMotor(spec)` keeps its own copy of the spec. Its `max_voltage` must be
  positive.
  - `voltage_in` is the input voltage. Setting it above `max_voltage` in
    absolute value raises `ValueError`.
  - `wheel_mass`, `loaded_mass`, `max_voltage`, `angular_speed_constant` and
    `voltage_in_constant` can be read and set on the motor. Negative values
    raise `ValueError`. `total_mass` is wheel mass plus loaded mass.
  - `drive_force(forward_speed)` gives the force along the wheel's forward
    normal. Back EMF lowers it as the wheel speeds up. A disabled motor gives 0.
  - `lateral_impulse(lateral_velocity)` gives the impulse that counters
    sideways slipping. A disabled motor gives `(0.0, 0.0)`.
  - `animation_state(forward_speed)` gives an `AnimationState`: `BACKWARD`
    when rolling or driven forward, `FORWARD` when rolling or driven in
    reverse, and otherwise `STOPPED`.
  - `enable()` and `disable()` switch the motor on and off.
- `texture_name(orientation, texture_type)` gives the sprite file name for a
  left or right (`Orientation`) wheel. It raises `ValueError` for
  `WheelTextureType.NONE`.

### `bots2d.telemetry`

`BotTelemetry` is fed with `update(milliseconds, forward_speed, angular_speed)`
on every step. It takes a sample only when more than 10 ms have passed since
the last one, and returns whether it did. It records `top_speed`,
`top_acceleration`, `time_to_top_speed`, `top_speed_acceleration`,
`forward_speed` and `forward_acceleration`. You can set callbacks as
attributes: `on_forward_acceleration_changed`, `on_top_speed_changed`,
`on_forward_speed_changed`, `on_time_to_top_speed_changed`,
`on_top_speed_acceleration_changed`, `on_top_acceleration_changed` and
`on_time_moving_changed`. The last one is given the milliseconds since the
robot started moving.

### `bots2d.physics_bot`

- `PhysicsBotTelemetry` works like `BotTelemetry` but takes only the forward
  speed: `update(milliseconds, forward_speed)`. It records `top_speed`,
  `acceleration_to_top_speed` and `time_to_top_speed`. `reset()` forgets them.
  Its callbacks are `on_forward_speed_changed`, `on_top_speed_changed`,
  `on_acceleration_to_top_speed_changed` and `on_forward_acceleration_changed`.
- `physics_bot_motor_force(forward_speed, voltage)` gives the wheel force of
  the fixed motor model of the test bot.
- `split_total_mass(mass, wheel_count=4)` returns a `MassSplit(body_mass,
  wheel_mass)`. It puts 20% of the mass on the wheels and the rest on the body.

### `bots2d.path`

- `PathBlueprint` names the predefined loops `SIMPLE`, `T_SHAPED` and
  `M_SHAPED`. `blueprint_path_points(blueprint)` returns their points.
- `turn_direction(p0, p1, p2)` returns the `Direction` of a right-angled turn.
  It raises `ValueError` if the turn is not right-angled.
- `right_angle_path_quads(points, width)` returns one `QuadCoords` per
  segment of a closed loop, for a line of the given width.

## Example

```python
from bots2d.path import PathBlueprint, blueprint_path_points, right_angle_path_quads
from bots2d.physics_bot import split_total_mass
from bots2d.telemetry import BotTelemetry
from bots2d.wheel_motor import WheelMotor, WheelMotorSpec

motor = WheelMotor(WheelMotorSpec(width=0.015, diameter=0.03, max_voltage=6.0))
motor.voltage_in = 6.0
force = motor.drive_force(forward_speed=0.0)

telemetry = BotTelemetry()
telemetry.on_top_speed_changed = print
telemetry.update(20, forward_speed=0.5, angular_speed=0.1)

quads = right_angle_path_quads(blueprint_path_points(PathBlueprint.SIMPLE), 0.02)
masses = split_total_mass(0.5)
```

## What it does not do

The package only computes forces, impulses, statistics and geometry. It does
not step a physics world, render anything, read a keyboard or run a scene. The
caller's own simulation must apply the forces and impulses to its bodies and
feed the telemetry with their speeds.