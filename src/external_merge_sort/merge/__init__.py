"""K-way merging of sorted runs."""

from external_merge_sort.merge.cursor import MergeCursor, open_cursor
from external_merge_sort.merge.merge import merge_runs
from external_merge_sort.merge.selection import merge_heap, merge_linear, select_linear
from external_merge_sort.merge.types import DEFAULT_STRATEGY, MergeStats, MergeStrategy

__all__ = [
    "DEFAULT_STRATEGY",
    "MergeCursor",
    "MergeStats",
    "MergeStrategy",
    "merge_heap",
    "merge_linear",
    "merge_runs",
    "open_cursor",
    "select_linear",
]
