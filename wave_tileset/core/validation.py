"""
Validation utilities for checking tileset completeness.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..models import DIRECTIONS

if TYPE_CHECKING:
    from ..models import Tileset


@dataclass
class OrientationValidation:
    """Validation result for a single orientation."""
    index: int
    tile_name: str
    missing_directions: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.missing_directions) == 0


@dataclass
class ValidationResult:
    """Overall validation result for a tileset."""
    orientation_results: dict[int, OrientationValidation] = field(default_factory=dict)
    orphan_orientations: list[int] = field(default_factory=list)  # no edges at all
    weightless_tiles: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return (all(r.is_valid for r in self.orientation_results.values())
                and len(self.orphan_orientations) == 0)

    @property
    def error_count(self) -> int:
        count = len(self.orphan_orientations)
        for r in self.orientation_results.values():
            count += len(r.missing_directions)
        return count

    @property
    def warning_count(self) -> int:
        return len(self.weightless_tiles)

    def get_orientations_with_issues(self) -> list[int]:
        """Get orientation indices that have any issues."""
        issues = set(self.orphan_orientations)
        for index, r in self.orientation_results.items():
            if not r.is_valid:
                issues.add(index)
        return sorted(issues)


def validate_tileset(tileset: 'Tileset') -> ValidationResult:
    """
    Validate a tileset for completeness.

    Checks:
    1. Every orientation has at least one neighbor in each direction
    2. Every tile has a positive weight

    A solver can still run on an invalid tileset, but orientations with a
    missing direction can never be placed next to anything on that side.
    """
    result = ValidationResult()

    for tile in tileset.tiles:
        if tile.weight <= 0:
            result.weightless_tiles.append(tile.name)

        for index in tile.orientations:
            orientation_result = OrientationValidation(index=index, tile_name=tile.name)
            has_any_edges = False

            for direction in DIRECTIONS:
                if tileset.neighbors(index, direction):
                    has_any_edges = True
                else:
                    orientation_result.missing_directions.append(direction.value)

            if not has_any_edges:
                result.orphan_orientations.append(index)

            result.orientation_results[index] = orientation_result

    return result
