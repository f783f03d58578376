"""Command-line renderer for plaid icons.

Usage::

    plaidicons --seed slackicons --size 1000 --output output.png
    plaidicons --size 256 --middle-color dark --metadata

Without ``--output`` the icon is written to ``outputs_dir`` as
``plaidicon_<seed>_<digest>_<size>.png``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from plaidicons.core.config import settings as default_settings
from plaidicons.core.errors import PlaidiconsError
from plaidicons.core.generator import IconGenerator

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="plaidicons",
        description="Render a deterministic plaid icon to a PNG file",
    )
    parser.add_argument("--seed", default=None, help="Seed string (random if omitted)")
    parser.add_argument(
        "--size",
        type=int,
        default=None,
        help=f"Output width and height in pixels (default: {default_settings.default_size})",
    )
    parser.add_argument("--output", type=Path, default=None, help="Output PNG path")
    parser.add_argument(
        "--no-anti-alias",
        action="store_true",
        help="Disable blending at block edges",
    )
    parser.add_argument(
        "--middle-color",
        choices=["average", "dark"],
        default=None,
        help="How the center block color is derived",
    )
    parser.add_argument(
        "--rotation",
        choices=["snapped", "continuous"],
        default=None,
        help="Rotation angle granularity",
    )
    parser.add_argument(
        "--metadata",
        action="store_true",
        help="Write a JSON sidecar next to the icon",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point of the ``plaidicons`` console script.

    Returns:
        Process exit status (0 on success, 1 when generation or writing fails)
    """
    args = build_parser().parse_args(argv)

    overrides = {}
    if args.no_anti_alias:
        overrides["anti_alias"] = False
    if args.middle_color:
        overrides["middle_color_mode"] = args.middle_color
    if args.rotation:
        overrides["rotation_mode"] = args.rotation
    if args.metadata:
        overrides["save_metadata"] = True
    if args.log_level:
        overrides["log_level"] = args.log_level

    settings = default_settings.model_copy(update=overrides)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    generator = IconGenerator(settings)
    try:
        _, path = generator.generate_and_save(size=args.size, seed=args.seed, output_path=args.output)
    except PlaidiconsError as e:
        logger.error(f"Error: {e}")
        return 1
    except OSError as e:
        logger.error(f"Could not write icon: {e}")
        return 1

    print(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
