from .tile import TileDefinition, NameEntry
from .adjacency import AdjacencyEdge, Direction, DIRECTIONS
from .tileset import Tileset, ACTION_COLUMNS
from .settings import LoaderSettings
from .result import LoadResult, LoadWarning, WarningKind

__all__ = [
    'TileDefinition', 'NameEntry',
    'AdjacencyEdge', 'Direction', 'DIRECTIONS',
    'Tileset', 'ACTION_COLUMNS',
    'LoaderSettings',
    'LoadResult', 'LoadWarning', 'WarningKind'
]
