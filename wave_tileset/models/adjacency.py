from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Compass direction from a tile towards its neighbor."""
    NORTH = 'N'
    EAST = 'E'
    SOUTH = 'S'
    WEST = 'W'

    def rotated(self, steps: int) -> 'Direction':
        """Direction after `steps` quarter turns clockwise."""
        index = DIRECTIONS.index(self)
        return DIRECTIONS[(index + steps) % len(DIRECTIONS)]

    @property
    def opposite(self) -> 'Direction':
        return self.rotated(2)

    @classmethod
    def parse(cls, value: str) -> 'Direction':
        """Accept either the letter ('E') or the member name ('east')."""
        try:
            return cls(value.upper())
        except ValueError:
            pass
        try:
            return cls[value.upper()]
        except KeyError:
            raise ValueError(f"Invalid direction: {value!r}") from None


# Clockwise order, starting at north
DIRECTIONS: list[Direction] = [
    Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST
]


@dataclass(frozen=True)
class AdjacencyEdge:
    """
    Directed adjacency: `right` may sit immediately `direction` of `left`.
    Both ends are global orientation indices.
    """
    direction: Direction
    left: int
    right: int

    def to_dict(self) -> dict:
        return {
            'direction': self.direction.value,
            'left': self.left,
            'right': self.right
        }
