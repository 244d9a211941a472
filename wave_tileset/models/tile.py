from dataclasses import dataclass


@dataclass(frozen=True)
class TileDefinition:
    """
    A tile declared in the tileset file.
    Owns a contiguous block of global orientation indices starting at `offset`.
    """
    name: str                         # unique key from the `name` attribute
    symmetry: str                     # resolved symmetry tag (X, I, \, T, L, F)
    weight: float = 1.0
    offset: int = 0                   # first global orientation index
    cardinality: int = 1              # number of orientations in the block

    @property
    def orientations(self) -> range:
        """Global orientation indices owned by this tile."""
        return range(self.offset, self.offset + self.cardinality)

    def global_index(self, case: int) -> int:
        """Convert a local case number into a global orientation index."""
        if not 0 <= case < self.cardinality:
            raise ValueError(
                f"Case {case} out of range for tile '{self.name}' "
                f"(cardinality {self.cardinality})"
            )
        return self.offset + case

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'symmetry': self.symmetry,
            'weight': self.weight,
            'offset': self.offset,
            'cardinality': self.cardinality
        }


@dataclass(frozen=True)
class NameEntry:
    """Where a tile's orientation block starts and how long it is."""
    offset: int
    cardinality: int

    def __contains__(self, case: int) -> bool:
        return 0 <= case < self.cardinality
