"""Sequential network that steps through an elevator program memory.

Each program word is 16 bits wide:

+--------+---------------------------------------------------------------+
| Bits   | Description                                                   |
+--------+---------------------------------------------------------------+
|  7..0  | jump address, loaded into the program counter on a true cond. |
|    8   | request to move upwards                                       |
|    9   | request to move downwards                                     |
|   10   | target door state (0: closed, 1: open)                        |
|   11   | request to clear the pending call on the current floor        |
| 14..12 | condition select index                                        |
|   15   | invert the selected condition                                 |
+--------+---------------------------------------------------------------+
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Optional

from liftseq.condsel import Condition

PROGRAM_SIZE = 256

_BIT_INV = 15
_BIT_COND_SEL = 12
_BIT_RESET = 11
_BIT_DOOR = 10
_BIT_DOWN = 9
_BIT_UP = 8

_MASK_COND_SEL = 0x7
_MASK_JUMP_ADDR = 0xFF
_MAX_WORD = 0xFFFF


class ProgramState(IntEnum):
    """Program counter locations where each state of the machine begins."""

    INIT = 0
    IDLE = 1
    CLOSE_DOOR = 4
    CHOOSE_DIR = 6
    MOVE_UP = 10
    MOVE_DOWN = 12
    ARRIVED = 14


@dataclass(frozen=True)
class Instruction:
    """A decoded program word."""

    jump_address: int = 0
    condition: Condition = Condition.ANY_CALL
    invert: bool = False
    reset_call: bool = False
    door_open: bool = False
    move_down: bool = False
    move_up: bool = False

    def __post_init__(self) -> None:
        if not 0 <= int(self.jump_address) <= _MASK_JUMP_ADDR:
            raise ValueError(f"jump address out of range: {self.jump_address}")
        object.__setattr__(self, "jump_address", int(self.jump_address))
        try:
            object.__setattr__(self, "condition", Condition(self.condition))
        except ValueError:
            raise ValueError(f"condition index out of range: {self.condition}") from None


def decode_instruction(word: int) -> Instruction:
    """Split a 16-bit program word into its fields."""
    if not 0 <= word <= _MAX_WORD:
        raise ValueError(f"program word out of range: {word}")

    def bit(position: int) -> bool:
        return bool((word >> position) & 1)

    return Instruction(
        jump_address=word & _MASK_JUMP_ADDR,
        condition=Condition((word >> _BIT_COND_SEL) & _MASK_COND_SEL),
        invert=bit(_BIT_INV),
        reset_call=bit(_BIT_RESET),
        door_open=bit(_BIT_DOOR),
        move_down=bit(_BIT_DOWN),
        move_up=bit(_BIT_UP),
    )


def encode_instruction(instruction: Instruction) -> int:
    """Pack an instruction into its 16-bit program word."""
    flags = (
        (instruction.invert, _BIT_INV),
        (instruction.reset_call, _BIT_RESET),
        (instruction.door_open, _BIT_DOOR),
        (instruction.move_down, _BIT_DOWN),
        (instruction.move_up, _BIT_UP),
    )
    word = instruction.jump_address | (int(instruction.condition) << _BIT_COND_SEL)
    for is_set, position in flags:
        if is_set:
            word |= 1 << position
    return word


def _jump(target: int, **fields) -> int:
    """Encode an unconditional jump (inverted constant false)."""
    return encode_instruction(
        Instruction(jump_address=target, condition=Condition.ALWAYS_FALSE, invert=True, **fields)
    )


def _branch(condition: Condition, target: int, **fields) -> int:
    return encode_instruction(Instruction(jump_address=target, condition=condition, **fields))


def _build_default_program() -> tuple[int, ...]:
    s = ProgramState
    words = {
        # Entry point on power-up.
        s.INIT: _jump(s.IDLE),
        # Wait for a call with the door open.
        s.IDLE: _branch(Condition.CALL_SAME, s.IDLE, reset_call=True, door_open=True),
        s.IDLE + 1: _branch(Condition.ANY_CALL, s.CLOSE_DOOR, door_open=True),
        s.IDLE + 2: _jump(s.IDLE, door_open=True),
        # A call is registered: close the door.
        s.CLOSE_DOOR: _branch(Condition.DOOR_CLOSED, s.CHOOSE_DIR),
        s.CLOSE_DOOR + 1: _jump(s.CLOSE_DOOR),
        # Door is closed: decide the direction.
        s.CHOOSE_DIR: _branch(Condition.CALL_ABOVE, s.MOVE_UP),
        s.CHOOSE_DIR + 1: _branch(Condition.CALL_BELOW, s.MOVE_DOWN),
        s.CHOOSE_DIR + 2: _branch(Condition.CALL_SAME, s.ARRIVED),
        s.CHOOSE_DIR + 3: _jump(s.IDLE),
        # Check for arrival before every move to prevent overshoot.
        s.MOVE_UP: _branch(Condition.CALL_SAME, s.ARRIVED),
        s.MOVE_UP + 1: _jump(s.MOVE_UP, move_up=True),
        s.MOVE_DOWN: _branch(Condition.CALL_SAME, s.ARRIVED),
        s.MOVE_DOWN + 1: _jump(s.MOVE_DOWN, move_down=True),
        # Arrived at a destination floor.
        s.ARRIVED: _branch(Condition.DOOR_OPEN, s.IDLE, reset_call=True, door_open=True),
        s.ARRIVED + 1: _jump(s.ARRIVED, reset_call=True, door_open=True),
    }
    return tuple(words.get(address, 0) for address in range(PROGRAM_SIZE))


DEFAULT_PROGRAM: tuple[int, ...] = _build_default_program()


class SequentialNetwork:
    """Interprets a program memory one instruction per step."""

    def __init__(self, program: Optional[Iterable[int]] = None) -> None:
        words = list(DEFAULT_PROGRAM if program is None else program)
        if len(words) > PROGRAM_SIZE:
            raise ValueError(f"program longer than {PROGRAM_SIZE} words: {len(words)}")
        for word in words:
            if not 0 <= word <= _MAX_WORD:
                raise ValueError(f"program word out of range: {word}")
        words.extend([0] * (PROGRAM_SIZE - len(words)))
        self._program: tuple[int, ...] = tuple(words)
        self._pc = 0

    @property
    def program(self) -> tuple[int, ...]:
        """The full program memory."""
        return self._program

    @property
    def pc(self) -> int:
        """The current program counter."""
        return self._pc

    def reset(self) -> None:
        """Return the program counter to the entry point."""
        self._pc = 0

    def step(self, condition_active: bool) -> Instruction:
        """Advance one cycle and return the instruction at the new location.

        ``condition_active`` is the result of the condition selected by the
        previous instruction: if true the program counter takes that
        instruction's jump address, otherwise it moves to the next word.
        """
        if condition_active:
            self._pc = self._program[self._pc] & _MASK_JUMP_ADDR
        else:
            self._pc = (self._pc + 1) % PROGRAM_SIZE
        return decode_instruction(self._program[self._pc])