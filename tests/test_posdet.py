from liftseq.posdet import PositionDetector


def test_elevator_position_is_reported_ok():
    assert PositionDetector().is_elevator_position_ok() is True


def test_door_position_is_reported_ok():
    assert PositionDetector().is_door_position_ok() is True


def test_repeated_queries_are_stable():
    detector = PositionDetector()
    results = {detector.is_elevator_position_ok() for _ in range(5)}
    results |= {detector.is_door_position_ok() for _ in range(5)}
    assert results == {True}