"""Structural checks run before any temporary file is created."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from external_merge_sort.errors import (
    FileTooLargeError,
    InputNotFoundError,
    MalformedRecordWidthError,
    OutputConflictError,
    OutputDirectoryMissingError,
    RecordCountNotDivisibleError,
)
from external_merge_sort.records import BUFFER_SIZE, SortConfig, is_well_formed
from external_merge_sort.segment.types import is_run_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ValidationReport:
    """What validation learned about an accepted input file."""

    file_size: int
    record_count: int


def check_input_exists(input_path: Path) -> None:
    if not input_path.is_file() or not os.access(input_path, os.R_OK):
        raise InputNotFoundError(input_path)


def check_file_size(input_path: Path, config: SortConfig) -> int:
    """Return the file size, rejecting files above the configured ceiling."""
    size = input_path.stat().st_size
    if size > config.max_file_size_bytes:
        raise FileTooLargeError(input_path, size, config.max_file_size_bytes)
    return size


def check_record_widths(input_path: Path, config: SortConfig) -> int:
    """
    Read the whole file record by record and return the record count.

    Every record must be exactly ``record_width`` bytes once its terminator
    is included, so a short trailing record fails too.
    """
    width = config.record_width
    record_count = 0

    with open(input_path, "rb", buffering=BUFFER_SIZE) as handle:
        for raw in iter(lambda: handle.read(width), b""):
            if not is_well_formed(raw, config):
                raise MalformedRecordWidthError(input_path, record_count, width)
            record_count += 1

    return record_count


def check_record_count(input_path: Path, record_count: int, config: SortConfig) -> None:
    if record_count % config.records_per_segment != 0:
        raise RecordCountNotDivisibleError(input_path, record_count, config.records_per_segment)


def check_output_directory(output_path: Path) -> None:
    directory = output_path.parent
    if not directory.is_dir() or not os.access(directory, os.W_OK | os.X_OK):
        raise OutputDirectoryMissingError(directory)


def check_output_name(input_path: Path, output_path: Path) -> None:
    """Reject an output that the run files of this input would clobber."""
    if is_run_path(input_path, output_path):
        raise OutputConflictError(output_path, input_path)


def validate_input(
    input_path: str | Path,
    output_path: str | Path,
    config: SortConfig,
) -> ValidationReport:
    """
    Run every precondition check in order; the first failure raises.

    Nothing is written to disk here, so a failure needs no cleanup.
    """
    input_file = Path(input_path)
    output_file = Path(output_path)

    check_input_exists(input_file)
    size = check_file_size(input_file, config)
    record_count = check_record_widths(input_file, config)
    check_record_count(input_file, record_count, config)
    check_output_directory(output_file)
    check_output_name(input_file, output_file)

    logger.debug("Validated %s: %d records, %d bytes", input_file.name, record_count, size)
    return ValidationReport(file_size=size, record_count=record_count)
