"""Command line entry point: binarise every image matching a glob."""
from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from .config import D
from .errors import InvalidArgument
from .pipeline import threshold_files

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="threshlab",
        description="Convert images to black-and-white (0/255) masks",
    )
    parser.add_argument("input_glob", help="Glob of input images, e.g. 'scans/*.png'")
    parser.add_argument("out_dir", help="Directory for the binarised images")
    parser.add_argument(
        "--method",
        default=D.METHOD,
        help=f"Threshold method: {', '.join(D.METHODS)} (default: {D.METHOD})",
    )
    parser.add_argument(
        "--inverted",
        action="store_true",
        help="Mark pixels at or below the threshold instead of above it",
    )
    parser.add_argument(
        "--thresh-value",
        type=float,
        default=D.THRESH_VALUE,
        help="Fixed 0-1 threshold used by the binary method (default: %(default)s)",
    )
    parser.add_argument("--summary", default=None, help="Optional JSON summary path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        rows = threshold_files(
            args.input_glob,
            args.out_dir,
            method=args.method,
            inverted=args.inverted,
            thresh_value=args.thresh_value,
            out_json=args.summary,
        )
    except (InvalidArgument, OSError) as exc:  # bad arguments, unreadable images
        logger.error("%s", exc)
        return 2
    logger.info("binarised %d file(s)", len(rows))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
