import pytest

from ventshutter.controller import TIMEOUT_CLOSING, TIMEOUT_OPENING, MotorController
from ventshutter.io import Channel, SimulatedIO
from ventshutter.states import ErrorFlag, ShutterState


@pytest.fixture
def io():
    return SimulatedIO()


@pytest.fixture
def ctrl(io):
    return MotorController(io)


def press(io, ctrl, button):
    io.set_input(button, True)
    ctrl.step()
    io.set_input(button, False)


def test_starts_idle_without_errors(ctrl):
    ctrl.step()
    assert ctrl.state() is ShutterState.IDLE
    assert ctrl.errors() == ErrorFlag.NONE


def test_open_button_starts_opening(io, ctrl):
    press(io, ctrl, Channel.OPEN_BUTTON)
    assert ctrl.state() is ShutterState.OPENING
    assert io.output(Channel.MOTOR_OPEN) is True
    assert io.output(Channel.MOTOR_CLOSE) is False


def test_open_sensor_stops_opening(io, ctrl):
    io.set_input(Channel.OPEN_BUTTON, True)
    ctrl.step()
    ctrl.step()  # held button is not a new press
    assert ctrl.state() is ShutterState.OPENING
    io.set_input(Channel.OPEN_SENSOR, True)
    ctrl.step()
    assert ctrl.state() is ShutterState.IDLE
    assert io.output(Channel.MOTOR_OPEN) is False


def test_close_button_interrupts_opening(io, ctrl):
    press(io, ctrl, Channel.OPEN_BUTTON)
    press(io, ctrl, Channel.CLOSE_BUTTON)
    assert ctrl.state() is ShutterState.IDLE
    assert io.output(Channel.MOTOR_OPEN) is False
    assert io.output(Channel.MOTOR_CLOSE) is False


def test_closing_stops_at_closed_sensor(io, ctrl):
    press(io, ctrl, Channel.CLOSE_BUTTON)
    assert ctrl.state() is ShutterState.CLOSING
    assert io.output(Channel.MOTOR_CLOSE) is True
    io.set_input(Channel.CLOSED_SENSOR, True)
    ctrl.step()
    assert ctrl.state() is ShutterState.IDLE
    assert io.output(Channel.MOTOR_CLOSE) is False


def test_open_button_interrupts_closing(io, ctrl):
    press(io, ctrl, Channel.CLOSE_BUTTON)
    press(io, ctrl, Channel.OPEN_BUTTON)
    assert ctrl.state() is ShutterState.IDLE
    assert io.output(Channel.MOTOR_CLOSE) is False


def test_opening_timeout(io, ctrl):
    press(io, ctrl, Channel.OPEN_BUTTON)
    for _ in range(TIMEOUT_OPENING):
        ctrl.step()
    assert ctrl.state() is ShutterState.OPENING
    ctrl.step()
    assert ctrl.state() is ShutterState.ERROR
    assert ctrl.errors() == ErrorFlag.TIMEOUT_OPENING
    assert io.output(Channel.MOTOR_OPEN) is True
    ctrl.step()
    assert ctrl.state() is ShutterState.IDLE
    assert io.output(Channel.MOTOR_OPEN) is False
    assert ctrl.errors() == ErrorFlag.TIMEOUT_OPENING


def test_closing_timeout_then_new_press_clears_errors(io, ctrl):
    press(io, ctrl, Channel.CLOSE_BUTTON)
    for _ in range(TIMEOUT_CLOSING + 1):
        ctrl.step()
    assert ctrl.errors() == ErrorFlag.TIMEOUT_CLOSING
    ctrl.step()
    press(io, ctrl, Channel.OPEN_BUTTON)
    assert ctrl.errors() == ErrorFlag.NONE
    assert ctrl.state() is ShutterState.OPENING


def test_error_signalling_after_opening_timeout(io, ctrl):
    press(io, ctrl, Channel.OPEN_BUTTON)
    for _ in range(TIMEOUT_OPENING + 1):
        ctrl.step()
    assert ctrl.error_debug() == 1


def test_both_sensors_raise_error(io, ctrl):
    io.set_input(Channel.OPEN_SENSOR, True)
    io.set_input(Channel.CLOSED_SENSOR, True)
    ctrl.step()
    assert ErrorFlag.BOTH_SENSORS_CONFIRMED in ctrl.errors()
    assert ctrl.state() is ShutterState.IDLE


def test_both_buttons_same_cycle_ends_closing(io, ctrl):
    io.set_input(Channel.OPEN_BUTTON, True)
    io.set_input(Channel.CLOSE_BUTTON, True)
    ctrl.step()
    assert ctrl.state() is ShutterState.CLOSING
    assert io.output(Channel.MOTOR_OPEN) is True
    assert io.output(Channel.MOTOR_CLOSE) is True


def test_reset_samples_held_button(io, ctrl):
    io.set_input(Channel.OPEN_BUTTON, True)
    ctrl.reset()
    ctrl.step()
    assert ctrl.state() is ShutterState.IDLE


def test_reset_returns_to_idle(io, ctrl):
    press(io, ctrl, Channel.OPEN_BUTTON)
    ctrl.reset()
    assert ctrl.state() is ShutterState.IDLE
    assert ctrl.errors() == ErrorFlag.NONE


def test_idle_lights_follow_sensors(io, ctrl):
    io.set_input(Channel.CLOSED_SENSOR, True)
    ctrl.step()
    assert io.output(Channel.CLOSE_LIGHT) is True
    assert io.output(Channel.OPEN_LIGHT) is False
    assert ctrl.close_light_debug() == 1
    assert ctrl.open_light_debug() == 2


def test_close_light_blinks_while_closing(io, ctrl):
    press(io, ctrl, Channel.CLOSE_BUTTON)
    ctrl.step()
    assert io.output(Channel.CLOSE_LIGHT) is True
    ctrl.step()
    assert ctrl.close_light_debug() == 3
    assert ctrl.state() is ShutterState.CLOSING