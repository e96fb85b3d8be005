"""Command-line interface for external merge sort."""

import argparse
import logging
import sys

from external_merge_sort.errors import SortError
from external_merge_sort.job import SortJob, sort_many
from external_merge_sort.job.execution import EXECUTOR_POLICIES
from external_merge_sort.merge.selection import MERGE_STRATEGIES
from external_merge_sort.records import SortConfig

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure logging to write to stderr."""
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="external-merge-sort",
        description="Sort files of fixed-width records that do not fit in memory.",
    )

    parser.add_argument(
        "paths",
        nargs="+",
        metavar="PATH",
        help="Input and output files, given in pairs: INPUT OUTPUT [INPUT OUTPUT ...]",
    )

    parser.add_argument(
        "--max-file-size",
        type=int,
        default=800000,
        help="Largest accepted input file in bytes (default: 800000)",
    )

    parser.add_argument(
        "--records-per-segment",
        type=int,
        default=1000,
        help="Records sorted in memory per temporary run (default: 1000)",
    )

    parser.add_argument(
        "--record-width",
        type=int,
        default=7,
        help="Bytes per record including the 2-byte terminator (default: 7)",
    )

    parser.add_argument(
        "--strategy",
        choices=sorted(MERGE_STRATEGIES),
        default="heap",
        help="Minimum selection during the merge (default: heap)",
    )

    parser.add_argument(
        "--executor",
        choices=EXECUTOR_POLICIES,
        default="threads",
        help="How several file pairs are sorted side by side (default: threads)",
    )

    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Worker count when sorting several pairs (default: executor's choice)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Configure logging based on --log-level
    log_level = getattr(logging, args.log_level)
    configure_logging(log_level)

    if len(args.paths) % 2 != 0:
        parser.error("paths must be given as INPUT OUTPUT pairs")

    try:
        config = SortConfig(
            max_file_size_bytes=args.max_file_size,
            records_per_segment=args.records_per_segment,
            record_width=args.record_width,
        )
    except ValueError as exc:
        parser.error(str(exc))

    job = SortJob(config, strategy=args.strategy)
    pairs = list(zip(args.paths[::2], args.paths[1::2], strict=True))

    try:
        if len(pairs) == 1:
            job.sort(*pairs[0])
        else:
            sort_many(job, pairs, executor=args.executor, workers=args.workers)
    except (SortError, ValueError) as exc:
        logger.error("%s", exc)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
