"""
Tile registration: assigns each tile a block of global orientation indices
and fills in the action table for those orientations.
"""

import logging
from typing import Optional

from ..models import TileDefinition, NameEntry, LoadWarning, WarningKind
from ..models.tileset import ActionRow
from .symmetry import resolve_symmetry

logger = logging.getLogger(__name__)


class TileRegistrar:
    """
    Owns the name index and action table for a single load.
    Indices are issued in registration order and never reused.
    """

    def __init__(self, warnings: Optional[list[LoadWarning]] = None):
        self.warnings: list[LoadWarning] = warnings if warnings is not None else []
        self._tiles: list[TileDefinition] = []
        self._offsets: dict[str, NameEntry] = {}
        self._action: list[ActionRow] = []

    @property
    def orientation_count(self) -> int:
        """Total indices issued so far."""
        return len(self._action)

    @property
    def tiles(self) -> list[TileDefinition]:
        return list(self._tiles)

    @property
    def name_index(self) -> dict[str, NameEntry]:
        return dict(self._offsets)

    def lookup(self, name: str) -> Optional[NameEntry]:
        return self._offsets.get(name)

    def action_row(self, index: int) -> ActionRow:
        return self._action[index]

    def action_table(self) -> tuple[ActionRow, ...]:
        return tuple(self._action)

    def register(self, name: Optional[str], symmetry: Optional[str],
                 weight: float = 1.0) -> Optional[TileDefinition]:
        """
        Add a tile and reserve its orientations.
        Returns None if the declaration was skipped.
        """
        if not name or not symmetry:
            self._warn(
                WarningKind.MISSING_ATTRIBUTE,
                f'incomplete tile node: name="{name}" symmetry="{symmetry}"'
            )
            return None

        if name in self._offsets:
            self._warn(WarningKind.DUPLICATE_TILE, f"tile '{name}' already declared")
            return None

        sym, known = resolve_symmetry(symmetry)
        if not known:
            self._warn(
                WarningKind.UNKNOWN_SYMMETRY,
                f"tile '{name}' has unknown symmetry '{symmetry}', using X"
            )

        logger.info("tile: %s %s %s", name, sym.value, weight)

        offset = len(self._action)
        cardinality = sym.cardinality
        self._offsets[name] = NameEntry(offset, cardinality)

        for t in range(cardinality):
            row = tuple(s + offset for s in sym.action_row(t))
            self._action.append(row)

        tile = TileDefinition(
            name=name,
            symmetry=sym.value,
            weight=weight,
            offset=offset,
            cardinality=cardinality
        )
        self._tiles.append(tile)
        return tile

    def _warn(self, kind: WarningKind, message: str) -> None:
        logger.warning(message)
        self.warnings.append(LoadWarning(kind, message))
