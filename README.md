# ventshutter

A small, step-driven controller for a motorised ventilation duct shutter.

The shutter has two push buttons (open, close), two end-position sensors
(open, closed), two motor outputs and two indicator lights. The controller is
meant to be stepped at a fixed rate (one step every 10 ms), and all timings
are counted in steps:

- a rising edge on the open or close button, while the motor is idle, clears
  the error register and starts the motor in that direction;
- the end-position sensor, or a press of the opposite button, stops the motor;
- a movement that does not reach its sensor within 3000 steps (30 s) sets a
  timeout error, and the motor is switched off on the following step;
- while idle without errors, each light shows the state of its sensor;
- while the motor moves, the matching light blinks (about 50 steps on and
  50 off);
- after a timeout, both lights blink together (period of about 100 steps for
  an opening timeout, about 200 for a closing timeout);
- both sensors active at the same time while idle sets
  `ErrorFlag.BOTH_SENSORS_CONFIRMED` in the error register.

## Installation

```
pip install .
```

## Usage

Hardware access goes through a `ShutterIO` object (`ventshutter.io`).
`SimulatedIO` keeps levels in memory and is handy for trying things out and
for testing:

```python
from ventshutter.io import Channel, SimulatedIO
from ventshutter.controller import MotorController
from ventshutter.states import ShutterState

io = SimulatedIO()
controller = MotorController(io)

io.set_input(Channel.OPEN_BUTTON, True)
controller.step()
assert controller.state() is ShutterState.OPENING
assert io.output(Channel.MOTOR_OPEN)

io.set_input(Channel.OPEN_BUTTON, False)
io.set_input(Channel.OPEN_SENSOR, True)
controller.step()
assert controller.state() is ShutterState.IDLE
assert not io.output(Channel.MOTOR_OPEN)
```

`SimulatedIO.read` and `set_input` accept only input channels, and `write`
and `output` only output channels; any other channel raises `ValueError`.

`MotorController.reset()` returns the controller to its power-up state and
samples the current button levels, so a button already held down does not
count as a press.

### Modules

- `ventshutter.controller` — `MotorController`: the motor state machine.
  `state()` returns a `ShutterState`, `errors()` returns an `ErrorFlag` bit
  set, and `close_light_debug()`, `open_light_debug()` and `error_debug()`
  report which branch of the light logic ran last.
- `ventshutter.indication` — `StateIndicator`: the light signalling, driven
  once per step by `update(shutter_state, errors, open_pressed, close_pressed)`;
  also `BlinkCommand` and `BlinkState`.
- `ventshutter.states` — `ShutterState`, `ErrorFlag` and
  `error_matches(errors, flag)`, which is true when no bit outside `flag` is
  set in `errors`.
- `ventshutter.io` — `Channel`, `ShutterIO` and `SimulatedIO`.
- `ventshutter.counters` — `Counter` and the `byte_counter()`,
  `word_counter()` and `long_counter()` factories. A counter starts stopped,
  counts down once per `decrement()`, and wraps from zero to its all-ones
  "off" value, at which `expired()` is true.

## What this package does not do

It contains no driver for real hardware and no command-line program. To run
it on a board, subclass `ShutterIO`, implement `read(channel)` and
`write(channel, level)` for your I/O, and call `controller.step()` from your
own 10 ms periodic task.

## Running the tests

```
pip install .[test]
pytest
```