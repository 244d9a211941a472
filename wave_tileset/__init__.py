"""
wave_tileset - builds the orientation, action and adjacency model of a
Wave Function Collapse tileset from its XML description.
"""

from .core import (
    load_tileset, load_tileset_file, build_tileset, validate_tileset,
    TilesetLoadError
)
from .models import Tileset, LoadResult, LoaderSettings, Direction

__version__ = "0.1.0"

__all__ = [
    'load_tileset', 'load_tileset_file', 'build_tileset', 'validate_tileset',
    'TilesetLoadError',
    'Tileset', 'LoadResult', 'LoaderSettings', 'Direction'
]
