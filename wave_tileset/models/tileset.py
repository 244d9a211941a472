from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from .adjacency import AdjacencyEdge, Direction, DIRECTIONS
from .tile import NameEntry, TileDefinition

# Columns of an action row: four clockwise rotations, then the same four mirrored
ACTION_COLUMNS = 8

ActionRow = tuple[int, int, int, int, int, int, int, int]


@dataclass(frozen=True)
class Tileset:
    """
    Root aggregate handed to the solver. Read-only once built.
    """
    tiles: tuple[TileDefinition, ...] = ()
    name_index: Mapping[str, NameEntry] = field(default_factory=dict, hash=False)
    action: tuple[ActionRow, ...] = ()
    edges: tuple[AdjacencyEdge, ...] = ()

    # {orientation: {direction: set of orientations allowed there}}
    _adjacency: dict[int, dict[Direction, set[int]]] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self):
        object.__setattr__(self, 'name_index', MappingProxyType(dict(self.name_index)))
        adjacency: dict[int, dict[Direction, set[int]]] = {}
        for edge in self.edges:
            # An edge holds both ways: left sits opposite the edge direction of right
            sides = adjacency.setdefault(edge.left, {d: set() for d in DIRECTIONS})
            sides[edge.direction].add(edge.right)
            sides = adjacency.setdefault(edge.right, {d: set() for d in DIRECTIONS})
            sides[edge.direction.opposite].add(edge.left)
        object.__setattr__(self, '_adjacency', adjacency)

    @property
    def orientation_count(self) -> int:
        return len(self.action)

    def get_tile(self, name: str) -> Optional[TileDefinition]:
        """Get a tile by name."""
        for tile in self.tiles:
            if tile.name == name:
                return tile
        return None

    def owner_of(self, index: int) -> tuple[TileDefinition, int]:
        """Return the tile owning a global orientation index and its local case."""
        for tile in self.tiles:
            if tile.offset <= index < tile.offset + tile.cardinality:
                return tile, index - tile.offset
        raise IndexError(f"Orientation {index} is not part of this tileset")

    def weights(self) -> list[float]:
        """Per-orientation weights; every orientation inherits its tile's weight."""
        result = [0.0] * self.orientation_count
        for tile in self.tiles:
            for index in tile.orientations:
                result[index] = tile.weight
        return result

    def neighbors(self, index: int, direction: Direction) -> set[int]:
        """Orientations allowed immediately `direction` of `index`."""
        if index not in self._adjacency:
            return set()
        return set(self._adjacency[index][direction])

    def can_be_neighbor(self, index: int, direction: Direction, neighbor: int) -> bool:
        return neighbor in self.neighbors(index, direction)

    def edges_for(self, index: int) -> list[AdjacencyEdge]:
        return [e for e in self.edges if e.left == index]

    def to_dict(self) -> dict:
        return {
            'tiles': [t.to_dict() for t in self.tiles],
            'name_index': {
                name: {'offset': e.offset, 'cardinality': e.cardinality}
                for name, e in self.name_index.items()
            },
            'action': [list(row) for row in self.action],
            'edges': [e.to_dict() for e in self.edges]
        }
