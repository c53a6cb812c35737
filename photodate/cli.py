"""Command-line interface for the ``photodate`` package.

This module exposes the CLI entrypoint used by the console script
``photodate``. It is a thin adapter from parsed arguments to
:class:`photodate.organize.RunConfig` and
:class:`photodate.organize.Reorganizer`, so tests can call :func:`main`
with an argument list instead of spawning subprocesses.
"""
import argparse
import logging
from importlib.metadata import version

from rich.console import Console
from rich.logging import RichHandler

from .errors import ConfigurationError, TraversalError
from .organize import Reorganizer, RunConfig
from .reporter import Reporter

__version__ = version("photodate")

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_TRAVERSAL_ERROR = 1
EXIT_CONFIG_ERROR = 2


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr through a rich handler."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def build_parser():
    parser = argparse.ArgumentParser(
        prog="photodate",
        description="Move files into YYYY_MM_DD folders using dates found in their names.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=__version__
    )
    parser.add_argument(
        "-f",
        "--from",
        dest="source",
        metavar="SOURCE",
        help="The directory to scan (default: current directory).",
    )
    parser.add_argument(
        "-t",
        "--to",
        dest="destination",
        metavar="DESTINATION",
        help=(
            "The directory where matching files go. Each file lands in a "
            "YYYY_MM_DD subdirectory. When omitted the run is a simulation."
        ),
    )
    parser.add_argument(
        "-p",
        "--pattern",
        metavar="PATTERN",
        help=(
            "Regular expression searched in each file name, e.g. "
            r"'(\d{4})-(\d{2})-(\d{2})'. Without a pattern nothing matches."
        ),
    )
    parser.add_argument(
        "-e",
        "--exif",
        action="store_true",
        help="Organise by EXIF data (not implemented, ignored).",
    )
    parser.add_argument("-y", "--year", type=int, default=0, metavar="YEAR",
                        help="Index of the year in the regular expression matching groups.")
    parser.add_argument("-m", "--month", type=int, default=0, metavar="MONTH",
                        help="Index of the month in the regular expression matching groups.")
    parser.add_argument("-d", "--day", type=int, default=0, metavar="DAY",
                        help="Index of the day in the regular expression matching groups.")
    parser.add_argument(
        "-l",
        "--limit",
        type=int,
        default=0,
        metavar="LIMIT",
        help="Stop after this many matching entries (default: no limit).",
    )
    parser.add_argument(
        "-s",
        "--simulate",
        action="store_true",
        help="Do not create directories or move files; only print actions.",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar of visited entries.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    if args.exif:
        logger.warning("--exif is not implemented, organising by file name only")

    try:
        config = RunConfig.create(
            source=args.source,
            dest_root=args.destination,
            pattern=args.pattern,
            year=args.year,
            month=args.month,
            day=args.day,
            limit=args.limit,
            simulate=args.simulate,
        )
    except ConfigurationError as e:
        logger.error("%s", e)
        return EXIT_CONFIG_ERROR

    reporter = Reporter()
    try:
        result = Reorganizer(config, reporter, progress=args.progress).run()
    except TraversalError as e:
        logger.error("%s", e)
        return EXIT_TRAVERSAL_ERROR

    reporter.summary(result.processed, limit_reached=result.limit_reached)
    return EXIT_OK
