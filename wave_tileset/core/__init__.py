from .symmetry import SymmetryClass, resolve_symmetry
from .registrar import TileRegistrar
from .adjacency import AdjacencyResolver, SideDescriptor, parse_side
from .events import ElementStart, ElementEnd, EndOfDocument
from .assembly import TilesetBuilder, build_tileset
from .errors import TilesetLoadError, TilesetNotFoundError, TilesetIOError, TilesetSyntaxError
from .loader import read_events, load_tileset, load_tileset_file
from .validation import validate_tileset, ValidationResult

__all__ = [
    'SymmetryClass', 'resolve_symmetry',
    'TileRegistrar',
    'AdjacencyResolver', 'SideDescriptor', 'parse_side',
    'ElementStart', 'ElementEnd', 'EndOfDocument',
    'TilesetBuilder', 'build_tileset',
    'TilesetLoadError', 'TilesetNotFoundError', 'TilesetIOError', 'TilesetSyntaxError',
    'read_events', 'load_tileset', 'load_tileset_file',
    'validate_tileset', 'ValidationResult'
]
