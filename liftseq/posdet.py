"""Position detection for the elevator car and its door."""


class PositionDetector:
    """Reports whether the car and the door sit at valid positions.

    A real installation would read level switches and door end-position
    switches; this detector always reports a valid position.
    """

    def is_elevator_position_ok(self) -> bool:
        """Return True if the car is level with a floor and may stop."""
        return True

    def is_door_position_ok(self) -> bool:
        """Return True if the door is at one of its end positions."""
        return True