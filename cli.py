# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
"""Command-line entry point: poll LibreNMS and write the weathermap SVG."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import ValidationError
from yaml import YAMLError

from services.collector import collect
from services.config import load_config
from services.librenms import WeathermapError
from services.render_svg import render

logger = logging.getLogger("weathermap")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="librenms-weathermap",
        description="Render a LibreNMS traffic weathermap as SVG.",
    )
    parser.add_argument("config", nargs="?", help="config file (default: $WEATHERMAP_CONFIG or config.yaml)")
    parser.add_argument("-o", "--output", help="write the SVG here instead of stdout")
    parser.add_argument(
        "--log-level",
        default="INFO",
        type=str.upper,
        choices=LOG_LEVELS,
        help="logging level (default: INFO)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    load_dotenv(find_dotenv(usecwd=True))
    logging.basicConfig(
        stream=sys.stderr,
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        svg = render(collect(load_config(args.config)))
        if args.output:
            Path(args.output).write_text(svg, encoding="utf-8")
        else:
            sys.stdout.write(svg)
    except (WeathermapError, YAMLError, ValidationError, OSError) as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
