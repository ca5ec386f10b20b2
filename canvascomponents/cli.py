#!/usr/bin/env python3
"""
Build the Canvas Components bookmarklet.

Usage:
    canvascomponents-build [--components GLOB] [--template PATH] [--out-dir DIR]
                           [--workers N] [--title TEXT] [--dry-run] [--verbose]

Reads components/*.html and canvascomponents.js from the current directory
by default and writes dist/bookmarklet, dist/bookmarklet.html and
dist/canvascomponents.min.js. A .env file in the working directory is loaded
first, so CANVASCOMPONENTS_* settings can live there.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from canvascomponents.build.pipeline import build
from canvascomponents.config import BuildConfig
from canvascomponents.errors import CanvasComponentsError
from canvascomponents.observability.logging import get_logger, set_level

logger = get_logger(__name__)


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return number


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Compile Canvas component files into a bookmarklet"
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=Path("."),
        help="Project root that relative paths are resolved against (default: .)",
    )
    parser.add_argument("--components", help="Glob for component files (default: components/*.html)")
    parser.add_argument("--template", type=Path, help="Template script (default: canvascomponents.js)")
    parser.add_argument("--out-dir", type=Path, help="Output directory (default: dist)")
    parser.add_argument("--workers", type=_positive_int, help="Parallel component workers")
    parser.add_argument("--title", help="Bookmarklet link text")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Build and validate everything but write nothing",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every file processed")
    return parser.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> BuildConfig:
    """Environment settings with command-line flags applied on top."""
    config = BuildConfig.from_env(root=args.root)
    if args.components:
        config.components_glob = args.components
    if args.template:
        config.template_path = args.template
    if args.out_dir:
        config.dist_dir = args.out_dir
    if args.workers:
        config.workers = args.workers
    if args.title:
        config.title = args.title
    config.dry_run = args.dry_run
    return config


def main(argv: list[str] | None = None) -> int:
    load_dotenv(find_dotenv(usecwd=True))
    args = parse_args(argv)
    if args.verbose:
        set_level("DEBUG")

    try:
        result = build(config_from_args(args))
    except CanvasComponentsError as exc:
        logger.error("Build failed: %s", exc)
        return 1

    verb = "Would write" if not result.written else "Wrote"
    for name, path in result.artifacts.items():
        print(f"{verb} {path} ({result.sizes[name]:,} bytes)")
    print(f"✓ {len(result.components)} components bundled")
    return 0


if __name__ == "__main__":
    sys.exit(main())
