"""Run generation ("segmenting")."""

from external_merge_sort.segment.registry import RunRegistry
from external_merge_sort.segment.segment import generate_runs, read_window, write_run
from external_merge_sort.segment.types import SegmentStats, is_run_path, run_glob, run_path

__all__ = [
    "RunRegistry",
    "SegmentStats",
    "generate_runs",
    "is_run_path",
    "read_window",
    "run_glob",
    "run_path",
    "write_run",
]
