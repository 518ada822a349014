import enum


class Position(enum.Enum):
    """Where a second field sits relative to a first one."""

    NONCONTIGUOUS = "noncontiguous"
    ABOVE = "above"
    BELOW = "below"
    LEFT = "left"
    RIGHT = "right"

    @property
    def is_vertical(self) -> bool:
        return self in (Position.ABOVE, Position.BELOW)

    @property
    def is_horizontal(self) -> bool:
        return self in (Position.LEFT, Position.RIGHT)

    def opposite(self) -> "Position":
        """The position of the first field as seen from the second one."""
        if self == Position.ABOVE:
            return Position.BELOW
        elif self == Position.BELOW:
            return Position.ABOVE
        elif self == Position.LEFT:
            return Position.RIGHT
        elif self == Position.RIGHT:
            return Position.LEFT
        elif self == Position.NONCONTIGUOUS:
            return Position.NONCONTIGUOUS
        else:
            raise RuntimeError(f"Unexpected Position value: {self}")
