# liftseq

An elevator controller built the way hardware designers build one: as a
**sequential network** that steps through a small program memory, paired
with a **condition selector** that feeds one chosen input (or its inverse)
back to the network on every cycle. A simple six-floor simulator drives the
controller and prints what the car does.

## Parts

### `liftseq.posdet`

`PositionDetector` reports whether the car is level with a floor
(`is_elevator_position_ok()`) and whether the door is at an end position
(`is_door_position_ok()`). Both always return `True`. Any object with these
two methods can be passed wherever a detector is accepted, for example to
model faulty sensors.

### `liftseq.condsel`

`select_condition(invert, index, values, detector=None)` picks one
condition from a `ConditionInputs` value by its index:

| Index | `Condition` member | Selected value                      |
|-------|--------------------|-------------------------------------|
| 0     | `ANY_CALL`         | any call pending (below/same/above) |
| 1     | `CALL_BELOW`       | call pending below                  |
| 2     | `CALL_SAME`        | call pending on the same floor      |
| 3     | `CALL_ABOVE`       | call pending above                  |
| 4     | `DOOR_CLOSED`      | door closed                         |
| 5     | `DOOR_OPEN`        | door open                           |
| 6     | `RESERVED`         | always false                        |
| 7     | `ALWAYS_FALSE`     | always false                        |

Call conditions are true only while the detector reports a valid car
position, door conditions only while it reports a valid door position. Any
other index selects false. `invert=True` negates the result. Without a
detector a default `PositionDetector` is used.

`ConditionInputs` is a frozen dataclass with the fields
`call_pending_below`, `call_pending_same`, `call_pending_above`,
`door_closed` and `door_open` (all `False` by default) and an
`any_call_pending` property.

### `liftseq.seqnet`

Each 16-bit program word holds:

| Bits   | Field                                              |
|--------|----------------------------------------------------|
| 7..0   | jump address                                       |
| 8      | request to move up                                 |
| 9      | request to move down                               |
| 10     | target door state (0: closed, 1: open)             |
| 11     | request to clear the call on the current floor     |
| 14..12 | condition select index                             |
| 15     | invert the selected condition                      |

`Instruction` is the decoded form (`jump_address`, `condition`, `invert`,
`reset_call`, `door_open`, `move_down`, `move_up`); it raises `ValueError`
for a jump address outside 0..255 or an unknown condition.
`decode_instruction(word)` and `encode_instruction(instruction)` convert
between the two; decoding raises `ValueError` for a word outside 0..0xFFFF.

`SequentialNetwork(program=None)` holds a 256-word program memory
(`PROGRAM_SIZE`). Without a program it uses `DEFAULT_PROGRAM`, the elevator
state machine whose states start at the addresses named by `ProgramState`
(`INIT`, `IDLE`, `CLOSE_DOOR`, `CHOOSE_DIR`, `MOVE_UP`, `MOVE_DOWN`,
`ARRIVED`). A shorter program is padded with zeros; a longer one, or one
with out-of-range words, raises `ValueError`.

- `step(condition_active)` loads the current instruction's jump address
  into the program counter if the condition is active, otherwise moves to
  the next word, and returns the decoded instruction at the new address.
- `reset()` returns the program counter to 0.
- `pc` and `program` expose the program counter and the memory.

### `liftseq.simulation`

`Elevator` is a dataclass with `current_floor`, `door_status`
(`DoorStatus.OPEN` / `CLOSED`), `movement_status`
(`MovementStatus.STOPPED` / `UP` / `DOWN`) and `pending_calls`, one flag
per floor (six by default).

- `apply(instruction)` sets the door only while stopped, moves one floor
  only while the door is closed and within the building, and clears the
  call on the floor reached when the instruction asks for it.
- `condition_inputs()` returns the `ConditionInputs` for the car's state.
- `any_calls_pending()` tells whether any call is registered.
- `status_line()` formats the floor, movement number, door and call bits.

`Simulator(elevator, detector=None)` always runs the default program.
`run(max_steps, out=None)` performs up to `max_steps` cycles, writing one
status line per cycle to `out` (standard output by default). It stops and
returns `True` once no calls are pending and the door is open, and returns
`False` if the step limit is reached first. `reset()` restarts the
controller from its entry point.

## Example

```python
from liftseq.simulation import Elevator, Simulator

elevator = Elevator()
elevator.pending_calls[3] = True

sim = Simulator(elevator)
sim.reset()
finished = sim.run(100)
print(finished, elevator.current_floor)   # True 3
```

## Command line

```
liftseq
```

runs the built-in scenarios: a single call, two calls on either side of
the car, the same two calls starting from floor 3, a call added while the
car is travelling, and a call to the floor the car is already on. The
command takes no options besides `--help`.

## What it does not do

The package reads no real sensors and drives no real car: position
detection is the always-valid `PositionDetector` unless you supply your
own, and the simulator models the car in memory only. `Simulator` cannot be
given a custom program; use `SequentialNetwork` directly for that.

## Tests

```
pip install -e ".[test]"
pytest
```