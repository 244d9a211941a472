"""
Tileset assembly: walks the document events, drives tile registration and
neighbor resolution, and produces the finished Tileset.
"""

import logging
import math
from enum import Enum, auto
from typing import Iterable, Optional

from ..models import LoaderSettings, LoadResult, LoadWarning, Tileset, WarningKind
from .adjacency import AdjacencyResolver
from .events import ElementEnd, ElementStart, EndOfDocument, XmlEvent
from .registrar import TileRegistrar

logger = logging.getLogger(__name__)

NODE_ROOT = 'set'
NODE_TILES = 'tiles'
NODE_TILE = 'tile'
NODE_NEIGHBORS = 'neighbors'
NODE_NEIGHBOR = 'neighbor'
ATTR_NAME = 'name'
ATTR_SYMMETRY = 'symmetry'
ATTR_WEIGHT = 'weight'
ATTR_LEFT = 'left'
ATTR_RIGHT = 'right'

TILE_ATTRIBUTES = {ATTR_NAME, ATTR_SYMMETRY, ATTR_WEIGHT}
NEIGHBOR_ATTRIBUTES = {ATTR_LEFT, ATTR_RIGHT}


class Section(Enum):
    """Where the builder is in the document tree."""
    OFF = auto()
    ROOT = auto()
    TILES = auto()
    NEIGHBORS = auto()
    IGNORED = auto()                  # inside an element whose content is skipped


class TilesetBuilder:
    """
    Composition root for a single load.
    Owns its registrar and resolver, so separate builders never share indices.
    """

    def __init__(self, settings: Optional[LoaderSettings] = None):
        self.settings = settings or LoaderSettings()
        self.warnings: list[LoadWarning] = []
        self.registrar = TileRegistrar(self.warnings)
        self.resolver = AdjacencyResolver(
            self.registrar,
            reference=self.settings.reference_direction,
            warnings=self.warnings
        )
        self._stack: list[Section] = [Section.OFF]
        self._ended = False
        self._truncated = False

    @property
    def section(self) -> Section:
        return self._stack[-1]

    def consume(self, events: Iterable[XmlEvent]) -> 'TilesetBuilder':
        for event in events:
            self.feed(event)
            if self._ended:
                break
        return self

    def feed(self, event: XmlEvent) -> None:
        if self._ended:
            return
        if isinstance(event, ElementStart):
            self._start(event.name, event.attributes)
        elif isinstance(event, ElementEnd):
            if len(self._stack) > 1:
                self._stack.pop()
        elif isinstance(event, EndOfDocument):
            self._ended = True
            self._truncated = event.truncated

    def build(self) -> LoadResult:
        """Finalize with whatever has been consumed."""
        if self._truncated or not self._ended:
            self._warn(WarningKind.TRUNCATED, "unexpected end of tileset document")

        tileset = Tileset(
            tiles=tuple(self.registrar.tiles),
            name_index=self.registrar.name_index,
            action=self.registrar.action_table(),
            edges=tuple(self.resolver.edges)
        )
        logger.info(
            "tileset loaded: %d tiles, %d orientations, %d edges, %d warnings",
            len(tileset.tiles), tileset.orientation_count,
            len(tileset.edges), len(self.warnings)
        )
        return LoadResult(tileset, list(self.warnings))

    # --- Element handling ---

    def _start(self, name: str, attributes: dict[str, str]) -> None:
        section = self.section

        if section == Section.OFF:
            if name == NODE_ROOT:
                self._check_attributes(name, attributes, set())
                self._stack.append(Section.ROOT)
            else:
                self._unknown_element(name, section)
        elif section == Section.ROOT:
            if name == NODE_TILES:
                self._check_attributes(name, attributes, set())
                self._stack.append(Section.TILES)
            elif name == NODE_NEIGHBORS:
                self._check_attributes(name, attributes, set())
                self._stack.append(Section.NEIGHBORS)
            else:
                self._unknown_element(name, section)
        elif section == Section.TILES:
            if name == NODE_TILE:
                self._handle_tile(attributes)
                self._stack.append(Section.IGNORED)
            else:
                self._unknown_element(name, section)
        elif section == Section.NEIGHBORS:
            if name == NODE_NEIGHBOR:
                self._handle_neighbor(attributes)
                self._stack.append(Section.IGNORED)
            else:
                self._unknown_element(name, section)
        else:
            self._stack.append(Section.IGNORED)

    def _unknown_element(self, name: str, section: Section) -> None:
        where = f"outside <{NODE_ROOT}>" if section == Section.OFF else f"in {section.name.lower()} section"
        self._warn(WarningKind.UNKNOWN_ELEMENT, f"unknown element <{name}> {where}")
        self._stack.append(Section.IGNORED)

    def _handle_tile(self, attributes: dict[str, str]) -> None:
        self._check_attributes(NODE_TILE, attributes, TILE_ATTRIBUTES)

        weight = self.settings.default_weight
        if ATTR_WEIGHT in attributes:
            text = attributes[ATTR_WEIGHT]
            try:
                weight = float(text)
            except ValueError:
                weight = math.nan
            if not math.isfinite(weight) or weight <= 0:
                self._warn(
                    WarningKind.INVALID_NUMBER,
                    f"tile '{attributes.get(ATTR_NAME)}' has invalid weight '{text}'"
                )
                return

        self.registrar.register(
            attributes.get(ATTR_NAME),
            attributes.get(ATTR_SYMMETRY),
            weight
        )

    def _handle_neighbor(self, attributes: dict[str, str]) -> None:
        self._check_attributes(NODE_NEIGHBOR, attributes, NEIGHBOR_ATTRIBUTES)
        self.resolver.resolve(attributes.get(ATTR_LEFT), attributes.get(ATTR_RIGHT))

    def _check_attributes(self, node: str, attributes: dict[str, str], known: set[str]) -> None:
        if not self.settings.warn_unknown_attributes:
            return
        for attr_name in attributes:
            if attr_name not in known:
                self._warn(
                    WarningKind.UNKNOWN_ATTRIBUTE,
                    f"unknown attribute in {node} node: {attr_name}"
                )

    def _warn(self, kind: WarningKind, message: str) -> None:
        logger.warning(message)
        self.warnings.append(LoadWarning(kind, message))


def build_tileset(events: Iterable[XmlEvent],
                  settings: Optional[LoaderSettings] = None) -> LoadResult:
    """Build a tileset from an already materialized event stream."""
    return TilesetBuilder(settings).consume(events).build()
