"""Shared types for the merge stage."""

from dataclasses import dataclass
from typing import Literal, TypeAlias

MergeStrategy: TypeAlias = Literal["heap", "linear"]

DEFAULT_STRATEGY: MergeStrategy = "heap"


@dataclass
class MergeStats:
    """Statistics from merge_runs operation."""

    runs_merged: int = 0
    records_written: int = 0
