import pytest

from bots2d.wheel_motor import (
    AnimationState,
    Orientation,
    WheelMotor,
    WheelMotorSpec,
    WheelTextureType,
    texture_name,
)


def make_motor(**overrides):
    params = dict(width=0.015, diameter=0.03, wheel_mass=0.02, loaded_mass=0.1)
    params.update(overrides)
    return WheelMotor(WheelMotorSpec(**params))


def test_spec_defaults():
    spec = WheelMotorSpec()
    assert spec.voltage_in_constant == 0.00628
    assert spec.angular_speed_constant == 0.00178
    assert spec.max_voltage == 6.0
    assert spec.friction_coefficient == 0.1
    assert spec.sideway_friction_constant == 100.0
    assert spec.texture_type is WheelTextureType.NONE


@pytest.mark.parametrize(
    "orientation, texture, expected",
    [
        (Orientation.LEFT, WheelTextureType.ORANGE, "wheel_sprite_left_orange.png"),
        (Orientation.RIGHT, WheelTextureType.ORANGE, "wheel_sprite_right_orange.png"),
        (Orientation.LEFT, WheelTextureType.GREEN, "wheel_sprite_left_green.png"),
        (Orientation.RIGHT, WheelTextureType.RED, "wheel_sprite_right_red.png"),
    ],
)
def test_texture_name(orientation, texture, expected):
    assert texture_name(orientation, texture) == expected


def test_texture_name_none_raises():
    with pytest.raises(ValueError):
        texture_name(Orientation.LEFT, WheelTextureType.NONE)


def test_constructor_rejects_non_positive_max_voltage():
    with pytest.raises(ValueError):
        make_motor(max_voltage=0.0)


def test_spec_is_copied():
    spec = WheelMotorSpec(diameter=0.03)
    motor = WheelMotor(spec)
    motor.max_voltage = 3.0
    assert spec.max_voltage == 6.0
    assert motor.max_voltage == 3.0


def test_voltage_in_limits():
    motor = make_motor()
    motor.voltage_in = -6.0
    assert motor.voltage_in == -6.0
    with pytest.raises(ValueError):
        motor.voltage_in = 6.5
    assert motor.voltage_in == -6.0


def test_force_zero_at_rest_without_voltage():
    motor = make_motor()
    assert motor.drive_force(0.0) == 0.0


def test_force_proportional_to_voltage_at_rest():
    motor = make_motor()
    motor.voltage_in = 1.5
    single = motor.drive_force(0.0)
    motor.voltage_in = 3.0
    assert motor.drive_force(0.0) == pytest.approx(2 * single)
    motor.voltage_in = -3.0
    assert motor.drive_force(0.0) == pytest.approx(-2 * single)
    assert single > 0


def test_back_emf_reduces_force():
    motor = make_motor()
    motor.voltage_in = 6.0
    assert motor.drive_force(0.5) < motor.drive_force(0.1) < motor.drive_force(0.0)
    motor.voltage_in = 0.0
    assert motor.drive_force(0.5) < 0.0


def test_disabled_motor_has_no_force_or_impulse():
    motor = make_motor()
    motor.voltage_in = 6.0
    motor.disable()
    assert motor.drive_force(0.0) == 0.0
    assert motor.lateral_impulse((1.0, 2.0)) == (0.0, 0.0)
    motor.enable()
    assert motor.drive_force(0.0) > 0.0


def test_lateral_impulse_opposes_velocity():
    motor = make_motor()
    assert motor.lateral_impulse((1.0, 0.0)) == (-100.0, -0.0)
    motor.spec.sideway_friction_constant = 25.0
    assert motor.lateral_impulse((0.0, -2.0)) == (-0.0, 50.0)


def test_animation_states():
    motor = make_motor()
    assert motor.animation_state(0.0) is AnimationState.STOPPED
    assert motor.animation_state(0.01) is AnimationState.STOPPED
    assert motor.animation_state(0.05) is AnimationState.BACKWARD
    assert motor.animation_state(-0.05) is AnimationState.FORWARD
    motor.voltage_in = -1.0
    assert motor.animation_state(0.0) is AnimationState.FORWARD
    motor.voltage_in = 1.0
    assert motor.animation_state(0.0) is AnimationState.BACKWARD
    motor.disable()
    assert motor.animation_state(0.5) is AnimationState.STOPPED


def test_masses():
    motor = make_motor(wheel_mass=0.02, loaded_mass=0.1)
    assert motor.total_mass == pytest.approx(0.12)
    motor.loaded_mass = 0.2
    motor.wheel_mass = 0.05
    assert motor.total_mass == pytest.approx(0.25)
    assert motor.spec.loaded_mass == 0.2


@pytest.mark.parametrize(
    "field",
    [
        "wheel_mass",
        "loaded_mass",
        "max_voltage",
        "angular_speed_constant",
        "voltage_in_constant",
    ],
)
def test_negative_values_rejected(field):
    motor = make_motor()
    before = getattr(motor, field)
    with pytest.raises(ValueError):
        setattr(motor, field, -1.0)
    assert getattr(motor, field) == before


def test_constants_update_force():
    motor = make_motor()
    motor.voltage_in = 3.0
    before = motor.drive_force(0.0)
    motor.voltage_in_constant = motor.voltage_in_constant * 2
    assert motor.drive_force(0.0) == pytest.approx(2 * before)
    motor.angular_speed_constant = 0.0
    assert motor.drive_force(1.0) == pytest.approx(motor.drive_force(0.0))