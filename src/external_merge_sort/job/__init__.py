"""Sort job orchestration."""

from external_merge_sort.job.sort import SortJob, SortResult, sort_file, sort_many

__all__ = ["SortJob", "SortResult", "sort_file", "sort_many"]
