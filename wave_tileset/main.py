#!/usr/bin/env python3
"""
Wave Tileset - load a tileset description and report the derived model.
"""

import argparse
import logging
import sys
from typing import Optional

from .core import load_tileset_file, validate_tileset, TilesetLoadError
from .models import Direction, LoaderSettings

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_LOAD_FAILED = 1
EXIT_INVALID = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='wave-tileset',
        description="Build the orientation and adjacency model of a WFC tileset."
    )
    parser.add_argument('path', help="tileset XML file")
    parser.add_argument('--log-level', default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    parser.add_argument('--reference-direction', default='E', type=Direction.parse,
                        help="direction of `right` relative to `left` (N, E, S or W)")
    parser.add_argument('--validate', action='store_true',
                        help="check that every orientation has neighbors on all sides")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s"
    )

    settings = LoaderSettings(reference_direction=args.reference_direction)

    try:
        result = load_tileset_file(args.path, settings)
    except TilesetLoadError as e:
        logger.error("%s", e)
        return EXIT_LOAD_FAILED

    tileset = result.tileset
    print(f"tiles:        {len(tileset.tiles)}")
    print(f"orientations: {tileset.orientation_count}")
    print(f"edges:        {len(tileset.edges)}")
    print(f"warnings:     {result.warning_count}")
    for warning in result.warnings:
        print(f"  {warning}")

    if args.validate:
        validation = validate_tileset(tileset)
        print(f"validation:   {validation.error_count} errors, {validation.warning_count} warnings")
        for index in validation.get_orientations_with_issues():
            r = validation.orientation_results[index]
            missing = ', '.join(r.missing_directions)
            print(f"  {r.tile_name} [{index}] missing: {missing}")
        if not validation.is_valid:
            return EXIT_INVALID

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
