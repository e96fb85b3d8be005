"""Errors raised by the external merge sort pipeline.

Each validation error keeps its constructor arguments in ``args`` so that it
survives pickling when a job runs in a process pool.
"""

from pathlib import Path


class SortError(Exception):
    """Base class for every failure surfaced by a sort job."""


class InputNotFoundError(SortError):
    def __init__(self, path: Path):
        super().__init__(path)
        self.path = path

    def __str__(self) -> str:
        return f"Input file does not exist or is not accessible: {self.path}"


class FileTooLargeError(SortError):
    def __init__(self, path: Path, size: int, limit: int):
        super().__init__(path, size, limit)
        self.path = path
        self.size = size
        self.limit = limit

    def __str__(self) -> str:
        return f"File size exceeds max_file_size_bytes: {self.size} > {self.limit} ({self.path})"


class MalformedRecordWidthError(SortError):
    """A record does not occupy exactly ``record_width`` bytes."""

    def __init__(self, path: Path, record_index: int, record_width: int):
        super().__init__(path, record_index, record_width)
        self.path = path
        self.record_index = record_index
        self.record_width = record_width

    def __str__(self) -> str:
        return (
            f"Record {self.record_index} in {self.path} does not have width "
            f"{self.record_width} (payload plus terminator)"
        )


class RecordCountNotDivisibleError(SortError):
    def __init__(self, path: Path, record_count: int, records_per_segment: int):
        super().__init__(path, record_count, records_per_segment)
        self.path = path
        self.record_count = record_count
        self.records_per_segment = records_per_segment

    def __str__(self) -> str:
        return (
            f"Number of records ({self.record_count}) in {self.path} is not divisible by "
            f"records_per_segment ({self.records_per_segment})"
        )


class OutputDirectoryMissingError(SortError):
    def __init__(self, directory: Path):
        super().__init__(directory)
        self.directory = directory

    def __str__(self) -> str:
        return f"Output directory does not exist: {self.directory}"


class OutputConflictError(SortError):
    """The output path would be overwritten or deleted as a temporary run."""

    def __init__(self, output_path: Path, input_path: Path):
        super().__init__(output_path, input_path)
        self.output_path = output_path
        self.input_path = input_path

    def __str__(self) -> str:
        return (
            f"Output {self.output_path} collides with the temporary run files of "
            f"{self.input_path}"
        )


class SortIOError(SortError):
    """A lower-level read, write, open or delete failure."""
