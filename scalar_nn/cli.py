from __future__ import annotations

import argparse
import logging

from .search.norms import NormType

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def add_common_io_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose logging",
    )


def add_seed_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--seed",
        type=int,
        default=1,
        help="Random seed (default: 1)",
    )


def add_norm_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--norm",
        type=NormType.parse,
        default=NormType.MAX_NORM,
        help="Norm: max_norm (|x1-x2|) or euclidean_squared ((x1-x2)^2) (default: max_norm)",
    )


def configure_logging(verbose: bool = False) -> None:
    """Root logging for the scripts: INFO by default, DEBUG with --verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        force=True,
    )
