"""External Merge Sort - Sort fixed-width record files larger than memory."""

from external_merge_sort.errors import (
    FileTooLargeError,
    InputNotFoundError,
    MalformedRecordWidthError,
    OutputConflictError,
    OutputDirectoryMissingError,
    RecordCountNotDivisibleError,
    SortError,
    SortIOError,
)
from external_merge_sort.job import SortJob, SortResult, sort_file, sort_many
from external_merge_sort.records import SortConfig

__all__ = [
    "FileTooLargeError",
    "InputNotFoundError",
    "MalformedRecordWidthError",
    "OutputConflictError",
    "OutputDirectoryMissingError",
    "RecordCountNotDivisibleError",
    "SortConfig",
    "SortError",
    "SortIOError",
    "SortJob",
    "SortResult",
    "sort_file",
    "sort_many",
]
