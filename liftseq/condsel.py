"""Condition selector: picks one system condition and optionally inverts it.

+-------+-------------------------------------+
| Index | Selected value                      |
+-------+-------------------------------------+
|   0   | call below or same or above pending |
|   1   | call below pending                  |
|   2   | call same pending                   |
|   3   | call above pending                  |
|   4   | door closed                         |
|   5   | door open                           |
|   6   | reserved (always false)             |
|   7   | fixed false                         |
+-------+-------------------------------------+
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Optional

from liftseq.posdet import PositionDetector


class Condition(IntEnum):
    """Index values understood by the condition selector."""

    ANY_CALL = 0
    CALL_BELOW = 1
    CALL_SAME = 2
    CALL_ABOVE = 3
    DOOR_CLOSED = 4
    DOOR_OPEN = 5
    RESERVED = 6
    ALWAYS_FALSE = 7


@dataclass(frozen=True)
class ConditionInputs:
    """External inputs the selector chooses from."""

    call_pending_below: bool = False
    call_pending_same: bool = False
    call_pending_above: bool = False
    door_closed: bool = False
    door_open: bool = False

    @property
    def any_call_pending(self) -> bool:
        """True if a call is pending on any floor."""
        return self.call_pending_below or self.call_pending_same or self.call_pending_above


_Selector = Callable[[ConditionInputs], bool]

_CALL_SELECTORS: dict[Condition, _Selector] = {
    Condition.ANY_CALL: lambda v: v.any_call_pending,
    Condition.CALL_BELOW: lambda v: v.call_pending_below,
    Condition.CALL_SAME: lambda v: v.call_pending_same,
    Condition.CALL_ABOVE: lambda v: v.call_pending_above,
}

_DOOR_SELECTORS: dict[Condition, _Selector] = {
    Condition.DOOR_CLOSED: lambda v: v.door_closed,
    Condition.DOOR_OPEN: lambda v: v.door_open,
}


def _evaluate(index: int, values: ConditionInputs, detector) -> bool:
    try:
        condition = Condition(index)
    except ValueError:
        return False
    if condition in _CALL_SELECTORS:
        return bool(detector.is_elevator_position_ok() and _CALL_SELECTORS[condition](values))
    if condition in _DOOR_SELECTORS:
        return bool(detector.is_door_position_ok() and _DOOR_SELECTORS[condition](values))
    return False


def select_condition(
    invert: bool,
    index: int,
    values: ConditionInputs,
    detector: Optional[PositionDetector] = None,
) -> bool:
    """Return the condition chosen by ``index``, inverted if ``invert`` is set.

    Call conditions are only true while the car position is valid, door
    conditions only while the door position is valid. Unknown indexes select
    a constant false.
    """
    if detector is None:
        detector = PositionDetector()
    result = _evaluate(index, values, detector)
    return result != bool(invert)