"""Elevator plant simulation driven by the sequential network controller."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Optional, TextIO

from liftseq.condsel import ConditionInputs, select_condition
from liftseq.posdet import PositionDetector
from liftseq.seqnet import Instruction, SequentialNetwork

NUM_FLOORS = 6


class DoorStatus(IntEnum):
    """State of the car door."""

    OPEN = 0
    CLOSED = 1


class MovementStatus(IntEnum):
    """State of the car's movement."""

    STOPPED = 0
    UP = 1
    DOWN = 2


@dataclass
class Elevator:
    """The simulated car: its floor, door, movement and registered calls."""

    current_floor: int = 0
    door_status: DoorStatus = DoorStatus.OPEN
    movement_status: MovementStatus = MovementStatus.STOPPED
    pending_calls: list[bool] = field(default_factory=lambda: [False] * NUM_FLOORS)

    def __post_init__(self) -> None:
        if not self.pending_calls:
            raise ValueError("an elevator needs at least one floor")
        if not 0 <= self.current_floor < len(self.pending_calls):
            raise ValueError(f"floor out of range: {self.current_floor}")
        self.door_status = DoorStatus(self.door_status)
        self.movement_status = MovementStatus(self.movement_status)

    @property
    def num_floors(self) -> int:
        """Number of floors served."""
        return len(self.pending_calls)

    def apply(self, instruction: Instruction) -> None:
        """Update the car according to the controller's requests."""
        if self.movement_status is MovementStatus.STOPPED:
            self.door_status = DoorStatus.OPEN if instruction.door_open else DoorStatus.CLOSED

        if self.door_status is DoorStatus.CLOSED:
            if instruction.move_up and self.current_floor < self.num_floors - 1:
                self.movement_status = MovementStatus.UP
            elif instruction.move_down and self.current_floor > 0:
                self.movement_status = MovementStatus.DOWN
            else:
                self.movement_status = MovementStatus.STOPPED
        else:
            self.movement_status = MovementStatus.STOPPED

        if self.movement_status is MovementStatus.UP:
            self.current_floor += 1
        elif self.movement_status is MovementStatus.DOWN:
            self.current_floor -= 1

        if instruction.reset_call:
            self.pending_calls[self.current_floor] = False

    def condition_inputs(self) -> ConditionInputs:
        """Summarise the car's state as inputs for the condition selector."""
        pending = [floor for floor, called in enumerate(self.pending_calls) if called]
        return ConditionInputs(
            call_pending_below=any(floor < self.current_floor for floor in pending),
            call_pending_same=self.current_floor in pending,
            call_pending_above=any(floor > self.current_floor for floor in pending),
            door_closed=self.door_status is DoorStatus.CLOSED,
            door_open=self.door_status is DoorStatus.OPEN,
        )

    def any_calls_pending(self) -> bool:
        """True if any floor has a registered call."""
        return any(self.pending_calls)

    def status_line(self) -> str:
        """One line describing the car's current state."""
        door = "Open  " if self.door_status is DoorStatus.OPEN else "Closed"
        calls = "".join("1" if called else "0" for called in self.pending_calls)
        return (
            f" Floor={self.current_floor}, Movement={int(self.movement_status)}, "
            f"Door={door}, Calls={calls}"
        )


class Simulator:
    """Runs the controller and the elevator against each other cycle by cycle."""

    def __init__(self, elevator: Elevator, detector: Optional[PositionDetector] = None) -> None:
        self.elevator = elevator
        self.detector = detector if detector is not None else PositionDetector()
        self.network = SequentialNetwork()
        self.condition_active = False

    def reset(self) -> None:
        """Restart the controller from its entry point."""
        self.network.reset()
        self.condition_active = False

    def run(self, max_steps: int, out: Optional[TextIO] = None) -> bool:
        """Run up to ``max_steps`` cycles, writing a status line per cycle.

        Stops early once no calls are pending and the door is open; returns
        True in that case and False if the step limit was reached.
        """
        if out is None:
            out = sys.stdout
        elevator = self.elevator
        for _ in range(max_steps):
            instruction = self.network.step(self.condition_active)
            elevator.apply(instruction)
            print(elevator.status_line(), file=out)

            self.condition_active = select_condition(
                instruction.invert,
                instruction.condition,
                elevator.condition_inputs(),
                self.detector,
            )

            if not elevator.any_calls_pending() and elevator.door_status is DoorStatus.OPEN:
                print("\nTest finished", file=out)
                return True
        return False


def _scenario(
    simulator: Simulator,
    title: str,
    start_floor: int,
    calls: Iterable[int],
    max_steps: int,
    out: TextIO,
) -> None:
    print(f"\n{title}", file=out)
    elevator = simulator.elevator
    elevator.current_floor = start_floor
    elevator.door_status = DoorStatus.OPEN
    elevator.movement_status = MovementStatus.STOPPED
    for floor in calls:
        elevator.pending_calls[floor] = True
    simulator.reset()
    simulator.run(max_steps, out)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the built-in demonstration scenarios."""
    parser = argparse.ArgumentParser(
        prog="liftseq",
        description="Run the elevator controller against a set of demonstration scenarios.",
    )
    parser.parse_args(argv)
    out = sys.stdout

    simulator = Simulator(Elevator())

    _scenario(simulator, "TEST 1: Call to Floor 3", 0, [3], 100, out)
    _scenario(simulator, "TEST 2: Calls to Floor 5 and 1", 0, [1, 5], 100, out)
    _scenario(simulator, "TEST 3:Calls to Floor 5 and 1 from Floor 3", 3, [1, 5], 100, out)

    _scenario(simulator, "TEST 4: Call during movement", 0, [5], 10, out)
    print("\nADDING NEW CALL TO 0 MID-TRIP", file=out)
    simulator.elevator.pending_calls[0] = True
    simulator.run(100, out)

    _scenario(simulator, "TEST 5: Call to Floor 0", 0, [0], 100, out)

    print("\nATests finished.", file=out)
    return 0


if __name__ == "__main__":
    sys.exit(main())