"""
Resolution of neighbor declarations into directed adjacency edges.

A declaration names two orientations, `left` and `right`, and states that
`right` may sit next to `left` along the reference direction. The other
three directions are derived by turning both orientations together through
the rotation columns of the action table.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..models import AdjacencyEdge, Direction, LoadWarning, WarningKind
from .registrar import TileRegistrar

logger = logging.getLogger(__name__)

# Rotation columns 0..3 of an action row
ROTATION_STEPS = 4


@dataclass(frozen=True)
class SideDescriptor:
    """One side of a neighbor declaration: a tile name and a local case number."""
    tile: str
    case: int = 0
    explicit: bool = False            # whether the case number was written out

    def __str__(self) -> str:
        # Mimic the attribute as written in the file
        if self.explicit:
            return f"{self.tile} {self.case}"
        return self.tile


def parse_side(text: Optional[str]) -> Optional[SideDescriptor]:
    """
    Parse a `left`/`right` attribute value.

    The text encodes `"{tile}"` or `"{tile} {case}"`. Returns None when no
    tile name is present. Raises ValueError when the case number is not a
    non-negative integer.
    """
    if text is None:
        return None
    parts = text.split()
    if not parts:
        return None

    tile = parts[0]
    if len(parts) == 1:
        return SideDescriptor(tile)

    try:
        case = int(parts[1])
    except ValueError:
        raise ValueError(f"invalid case number '{parts[1]}' in '{text}'") from None
    if case < 0:
        raise ValueError(f"negative case number in '{text}'")
    return SideDescriptor(tile, case, explicit=True)


class AdjacencyResolver:
    """
    Turns neighbor declarations into edges using a registrar's name index
    and action table.
    """

    def __init__(self, registrar: TileRegistrar,
                 reference: Direction = Direction.EAST,
                 warnings: Optional[list[LoadWarning]] = None):
        self.registrar = registrar
        self.reference = reference
        self.warnings: list[LoadWarning] = warnings if warnings is not None else []
        self.edges: list[AdjacencyEdge] = []

    def resolve(self, left: Optional[str], right: Optional[str]) -> list[AdjacencyEdge]:
        """
        Resolve one declaration and append its edges.
        Returns the new edges; empty if the declaration was dropped.
        """
        sides = []
        for label, text in (('left', left), ('right', right)):
            try:
                side = parse_side(text)
            except ValueError as e:
                self._warn(WarningKind.INVALID_NUMBER, f"neighbour {label}: {e}")
                return []
            if side is None:
                self._warn(WarningKind.MISSING_ATTRIBUTE, f"neighbour {label} not found")
                return []
            if text is not None and len(text.split()) > 2:
                self._warn(
                    WarningKind.EXTRA_TOKENS,
                    f"neighbour {label}: ignoring trailing text in '{text}'"
                )
            sides.append(side)

        left_side, right_side = sides
        logger.info("neighbours: %s, %s", left_side, right_side)

        left_index = self._resolve_side(left_side)
        right_index = self._resolve_side(right_side)
        if left_index is None or right_index is None:
            return []

        new_edges = self.expand(left_index, right_index)
        self.edges.extend(new_edges)
        return new_edges

    def expand(self, left: int, right: int) -> list[AdjacencyEdge]:
        """
        One edge per compass direction. Step k turns both orientations by k
        quarter turns and moves the direction k steps clockwise from the
        reference; step 0 is the declared pair itself.

        Pairing a rotation column with a clockwise step is a convention.
        Models whose quarter turn runs counter-clockwise pair the same
        columns with north and south swapped.
        """
        left_row = self.registrar.action_row(left)
        right_row = self.registrar.action_row(right)
        return [
            AdjacencyEdge(
                direction=self.reference.rotated(k),
                left=left_row[k],
                right=right_row[k]
            )
            for k in range(ROTATION_STEPS)
        ]

    def _resolve_side(self, side: SideDescriptor) -> Optional[int]:
        entry = self.registrar.lookup(side.tile)
        if entry is None:
            self._warn(WarningKind.UNKNOWN_TILE, f"neighbour references unknown tile '{side.tile}'")
            return None
        if side.case not in entry:
            self._warn(
                WarningKind.CASE_OUT_OF_RANGE,
                f"case {side.case} out of range for tile '{side.tile}' "
                f"(cardinality {entry.cardinality})"
            )
            return None
        return entry.offset + side.case

    def _warn(self, kind: WarningKind, message: str) -> None:
        logger.warning(message)
        self.warnings.append(LoadWarning(kind, message))
