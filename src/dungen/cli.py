from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from . import __version__
from .config import load_config
from .errors import DungenError
from .generator import generate_layout
from .logging_config import configure_logging
from .render import load_texture, render_map, save_image
from .rng import RNG

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = Path("config.yaml")
DEFAULT_OUTPUT = Path("output.png")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="dungen",
        description="Generate a rooms-and-corridors dungeon and render it from a texture atlas",
    )
    p.add_argument("texture", type=Path, help="Path to the texture atlas image")
    p.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Map settings YAML (default: ./{DEFAULT_CONFIG} if present, else built-in defaults)",
    )
    p.add_argument("-o", "--output", type=Path, default=DEFAULT_OUTPUT, help="Output image path")
    p.add_argument("--seed", type=int, default=None, help="Seed the generator (overrides config)")
    p.add_argument("--ascii", action="store_true", help="Also print the tile grid as text")
    p.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def _resolve_config_path(arg: Optional[Path]) -> Optional[Path]:
    if arg is not None:
        return arg
    if DEFAULT_CONFIG.exists():
        return DEFAULT_CONFIG
    logger.info("No %s in working directory; using built-in defaults", DEFAULT_CONFIG)
    return None


def run(args: argparse.Namespace) -> int:
    config = load_config(_resolve_config_path(args.config), seed=args.seed)
    texture = load_texture(args.texture)
    layout = generate_layout(
        config.width,
        config.height,
        config.tile_size,
        config.room_config(),
        RNG(config.seed),
    )
    if args.ascii:
        print("\n".join(layout.grid.to_str_lines()))
    image = render_map(layout.grid, texture, config.atlas(), config.width, config.height, config.tile_size)
    save_image(image, args.output)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    try:
        return run(args)
    except DungenError as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
