import pytest

from liftseq.condsel import Condition, ConditionInputs, select_condition


class FakeDetector:
    def __init__(self, elevator_ok=True, door_ok=True):
        self.elevator_ok = elevator_ok
        self.door_ok = door_ok
        self.elevator_calls = 0
        self.door_calls = 0

    def is_elevator_position_ok(self):
        self.elevator_calls += 1
        return self.elevator_ok

    def is_door_position_ok(self):
        self.door_calls += 1
        return self.door_ok


@pytest.mark.parametrize(
    "inputs, expected",
    [
        (ConditionInputs(), False),
        (ConditionInputs(call_pending_below=True), True),
        (ConditionInputs(call_pending_same=True), True),
        (ConditionInputs(call_pending_above=True), True),
    ],
)
def test_any_call_pending_elevator_position_ok(inputs, expected):
    detector = FakeDetector(elevator_ok=True)
    assert select_condition(False, 0, inputs, detector) is expected
    assert detector.elevator_calls == 1
    assert detector.door_calls == 0


@pytest.mark.parametrize(
    "inputs",
    [
        ConditionInputs(),
        ConditionInputs(call_pending_below=True),
        ConditionInputs(call_pending_same=True),
        ConditionInputs(call_pending_above=True),
    ],
)
def test_any_call_pending_elevator_position_not_ok(inputs):
    detector = FakeDetector(elevator_ok=False)
    assert select_condition(False, 0, inputs, detector) is False
    assert detector.elevator_calls == 1
    assert detector.door_calls == 0


def test_individual_call_conditions_elevator_position_ok():
    detector = FakeDetector(elevator_ok=True)
    inputs = ConditionInputs(call_pending_below=True)
    assert select_condition(False, 1, inputs, detector) is True
    inputs = ConditionInputs(call_pending_below=True, call_pending_same=True)
    assert select_condition(False, 2, inputs, detector) is True
    inputs = ConditionInputs(
        call_pending_below=True, call_pending_same=True, call_pending_above=True
    )
    assert select_condition(False, 3, inputs, detector) is True
    assert detector.elevator_calls == 3
    assert detector.door_calls == 0


def test_individual_call_conditions_elevator_position_not_ok():
    detector = FakeDetector(elevator_ok=False)
    inputs = ConditionInputs(call_pending_below=True)
    assert select_condition(False, 1, inputs, detector) is False
    inputs = ConditionInputs(call_pending_below=True, call_pending_same=True)
    assert select_condition(False, 2, inputs, detector) is False
    inputs = ConditionInputs(
        call_pending_below=True, call_pending_same=True, call_pending_above=True
    )
    assert select_condition(False, 3, inputs, detector) is False
    assert detector.elevator_calls == 3
    assert detector.door_calls == 0


def test_individual_call_conditions_select_only_their_own_input():
    detector = FakeDetector()
    inputs = ConditionInputs(call_pending_above=True)
    assert select_condition(False, Condition.CALL_BELOW, inputs, detector) is False
    assert select_condition(False, Condition.CALL_SAME, inputs, detector) is False
    assert select_condition(False, Condition.CALL_ABOVE, inputs, detector) is True


def test_door_conditions_door_position_ok():
    detector = FakeDetector(door_ok=True)
    inputs = ConditionInputs(door_closed=True)
    assert select_condition(False, 4, inputs, detector) is True
    inputs = ConditionInputs(door_closed=True, door_open=True)
    assert select_condition(False, 5, inputs, detector) is True
    assert detector.door_calls == 2
    assert detector.elevator_calls == 0


def test_door_conditions_door_position_not_ok():
    detector = FakeDetector(door_ok=False)
    inputs = ConditionInputs(door_closed=True)
    assert select_condition(False, 4, inputs, detector) is False
    inputs = ConditionInputs(door_closed=True, door_open=True)
    assert select_condition(False, 5, inputs, detector) is False
    assert detector.door_calls == 2
    assert detector.elevator_calls == 0


def test_always_false():
    detector = FakeDetector()
    inputs = ConditionInputs()
    assert select_condition(False, 6, inputs, detector) is False
    assert select_condition(False, 7, inputs, detector) is False
    assert detector.elevator_calls == 0
    assert detector.door_calls == 0


def test_reserved_and_fixed_false_ignore_inputs():
    detector = FakeDetector()
    inputs = ConditionInputs(True, True, True, True, True)
    assert select_condition(False, Condition.RESERVED, inputs, detector) is False
    assert select_condition(False, Condition.ALWAYS_FALSE, inputs, detector) is False


def test_inversion():
    detector = FakeDetector()
    inputs = ConditionInputs(call_pending_below=True)
    assert select_condition(True, 1, inputs, detector) is False
    assert detector.elevator_calls == 1

    inputs = ConditionInputs(call_pending_below=True, door_closed=False)
    assert select_condition(True, 4, inputs, detector) is True
    assert detector.door_calls == 1

    assert select_condition(True, 7, inputs, detector) is True
    assert detector.elevator_calls == 1
    assert detector.door_calls == 1


def test_invalid_index():
    detector = FakeDetector()
    inputs = ConditionInputs()
    assert select_condition(False, 8, inputs, detector) is False
    assert select_condition(False, 255, inputs, detector) is False
    assert detector.elevator_calls == 0
    assert detector.door_calls == 0


def test_default_detector_reports_valid_positions():
    inputs = ConditionInputs(call_pending_same=True, door_open=True)
    assert select_condition(False, Condition.CALL_SAME, inputs) is True
    assert select_condition(False, Condition.DOOR_OPEN, inputs) is True
    assert select_condition(True, Condition.DOOR_CLOSED, inputs) is True


def test_any_call_pending_property():
    assert ConditionInputs().any_call_pending is False
    assert ConditionInputs(call_pending_above=True).any_call_pending is True
    assert ConditionInputs(door_open=True, door_closed=True).any_call_pending is False