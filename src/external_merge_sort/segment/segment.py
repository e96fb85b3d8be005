"""Run generation: sort fixed windows of the input into temporary runs."""

import logging
from pathlib import Path
from typing import BinaryIO

from external_merge_sort.records import (
    BUFFER_SIZE,
    Record,
    SortConfig,
    decode_record,
    encode_record,
    read_records_at,
)
from external_merge_sort.segment.registry import RunRegistry
from external_merge_sort.segment.types import SegmentStats, run_path

logger = logging.getLogger(__name__)


def read_window(handle: BinaryIO, offset: int, config: SortConfig) -> list[Record]:
    """
    Read up to ``records_per_segment`` records starting at ``offset``.

    Returns fewer records only when end of file falls inside the window,
    and an empty list once the offset is at end of file.
    """
    raw_records = read_records_at(
        handle, offset, config.records_per_segment, config.record_width
    )
    return [decode_record(raw) for raw in raw_records]


def write_run(records: list[Record], path: Path, config: SortConfig) -> None:
    """Write already-sorted records as one fixed-width run file."""
    with open(path, "wb", buffering=BUFFER_SIZE) as handle:
        handle.writelines(encode_record(record, config) for record in records)


def generate_runs(
    input_path: str | Path,
    config: SortConfig,
    registry: RunRegistry,
) -> tuple[list[Path], SegmentStats]:
    """
    Split a validated input file into sorted runs, one per window.

    Each run is registered before it is written so that the registry can
    delete it even if writing fails part-way.

    Args:
        input_path: Path to a file that passed validation.
        config: Record width and window size.
        registry: Receives every run path created.

    Returns:
        Tuple of (run paths in file order, segment statistics).
    """
    input_file = Path(input_path)
    stats = SegmentStats()
    runs: list[Path] = []
    offset = 0

    with open(input_file, "rb") as handle:
        while True:
            window = read_window(handle, offset, config)
            if not window:
                break

            window.sort()

            path = registry.register(run_path(input_file, stats.runs_written))
            write_run(window, path, config)
            runs.append(path)

            consumed = len(window) * config.record_width
            logger.debug(
                "Run %d: %d records from offset %d -> %s",
                stats.runs_written,
                len(window),
                offset,
                path.name,
            )

            offset += consumed
            stats.bytes_read += consumed
            stats.records_read += len(window)
            stats.runs_written += 1

    return runs, stats
