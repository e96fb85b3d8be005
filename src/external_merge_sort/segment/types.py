"""Run-file naming and statistics for segmenting."""

from dataclasses import dataclass
from pathlib import Path

# Infix between the input stem and the segment index in run-file names.
RUN_INFIX = "-temp-"

# Suffix used when the input file has no extension.
DEFAULT_RUN_SUFFIX = ".txt"


@dataclass
class SegmentStats:
    """Statistics from generate_runs operation."""

    runs_written: int = 0
    records_read: int = 0
    bytes_read: int = 0


def run_path(input_path: Path, segment_index: int) -> Path:
    """
    Name the temporary run for one segment of ``input_path``.

    Runs live beside the input and embed its stem, so inputs with distinct
    names never collide.
    """
    suffix = input_path.suffix or DEFAULT_RUN_SUFFIX
    return input_path.with_name(f"{input_path.stem}{RUN_INFIX}{segment_index}{suffix}")


def run_glob(input_path: Path) -> str:
    """Glob pattern matching every run file ``run_path`` can produce for an input."""
    suffix = input_path.suffix or DEFAULT_RUN_SUFFIX
    return f"{input_path.stem}{RUN_INFIX}*{suffix}"


def is_run_path(input_path: Path, candidate: Path) -> bool:
    """Check whether ``candidate`` could be one of the runs of ``input_path``."""
    input_file = input_path.resolve()
    candidate_file = candidate.resolve()
    return candidate_file.parent == input_file.parent and candidate_file.match(
        run_glob(input_file)
    )
