"""
City Overlays — Preview Entry Point

Paints a preset city's mask onto a blank grid and prints it as ASCII:
    ~  water
    .  land
    #  anything else

Usage:
    city-overlays --city new_york
    city-overlays --lat 37.77 --lng -122.42 --size 48
    city-overlays --city san_francisco --verbose --log-file
"""

import argparse
import logging
import sys
from typing import List, Optional

from city_overlays.config import LAND, LOG_DIR, REFERENCE_GRID_SIZE, WATER
from city_overlays.core.logger import OverlayLogger
from city_overlays.world.map import Grid, blank_grid
from city_overlays.world.overlays import apply_city_overlay, has_overlay
from city_overlays.world.presets import CityId, detect_preset_city, parse_city_id


GLYPHS = {WATER: "~", LAND: "."}


def render_ascii(grid: Grid) -> str:
    """One line per row, one glyph per tile."""
    return "\n".join(
        "".join(GLYPHS.get(tile.building.type, "#") for tile in row)
        for row in grid
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Preview preset city overlays")
    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--city", "-c", choices=[c.value for c in CityId],
                        help="Preset city to paint")
    target.add_argument("--lat", type=float,
                        help="Latitude to match against presets (needs --lng)")
    parser.add_argument("--lng", type=float,
                        help="Longitude to match against presets")
    parser.add_argument("--size", "-n", type=int, default=REFERENCE_GRID_SIZE,
                        help=f"Grid size (default {REFERENCE_GRID_SIZE})")
    parser.add_argument("--log-file", nargs="?", const="", default=None,
                        help=f"Also write the log to this file (default: a dated file under {LOG_DIR}/)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log each recipe step")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.lat is not None and args.lng is None:
        parser.error("--lat requires --lng")
    if args.lng is not None and args.lat is None:
        parser.error("--lng requires --lat")
    if args.size < 0:
        parser.error("--size must be >= 0")

    log = OverlayLogger()
    if args.verbose:
        log.set_level(logging.DEBUG)
    if args.log_file is not None:
        log.log_to_file(args.log_file or None)

    if args.city:
        city = parse_city_id(args.city)
    else:
        city = detect_preset_city(args.lat, args.lng)
        if city is None:
            print(f"  No preset city near ({args.lat}, {args.lng}).", file=sys.stderr)
            return 1
        log.log_event("MATCH", f"({args.lat}, {args.lng}) -> {city.value}")

    if not has_overlay(city):
        print(f"  {city.value} has no overlay; terrain is left as generated.",
              file=sys.stderr)
        return 1

    grid = blank_grid(args.size)
    apply_city_overlay(grid, city)
    log.log_event("OVERLAY", f"Painted {city.value} on {args.size}x{args.size} grid")

    print(f"  {city.value} ({args.size}x{args.size})")
    print(render_ascii(grid))
    return 0


if __name__ == "__main__":
    sys.exit(main())
