"""Sort job orchestration: validate, generate runs, merge."""

import logging
import time
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from external_merge_sort.errors import SortIOError
from external_merge_sort.job.execution import describe_executor, get_executor_class
from external_merge_sort.merge import DEFAULT_STRATEGY, MergeStats, MergeStrategy, merge_runs
from external_merge_sort.merge.selection import get_merge_function
from external_merge_sort.records import SortConfig
from external_merge_sort.segment import RunRegistry, SegmentStats, generate_runs, is_run_path
from external_merge_sort.segment.types import DEFAULT_RUN_SUFFIX
from external_merge_sort.validate import validate_input

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SortResult:
    """Outcome of one successful sort."""

    input_path: Path
    output_path: Path
    record_count: int
    segment_stats: SegmentStats
    merge_stats: MergeStats
    elapsed: float

    @property
    def runs(self) -> int:
        return self.segment_stats.runs_written


@dataclass(frozen=True, slots=True)
class SortJob:
    """
    Sort fixed-width record files with one immutable configuration.

    A job holds no per-sort state, so ``sort`` may run concurrently on
    the same instance for files with different names.
    """

    config: SortConfig
    strategy: MergeStrategy = DEFAULT_STRATEGY

    def __post_init__(self) -> None:
        get_merge_function(self.strategy)

    def sort(self, input_path: str | Path, output_path: str | Path) -> SortResult:
        """
        Sort ``input_path`` into ``output_path``.

        Three stages run strictly in sequence:
        1. Validate the input file and output directory
        2. Sort fixed windows of records into temporary runs
        3. Merge the runs into the output file

        Temporary runs are deleted on every exit path.
        """
        total_start = time.perf_counter()
        input_file = Path(input_path)
        output_file = Path(output_path)
        config = self.config

        logger.info(
            f"Starting: file={input_file.name}, output={output_file}, "
            f"max_size={config.max_file_size_bytes}, segment={config.records_per_segment}, "
            f"width={config.record_width}, strategy={self.strategy}"
        )

        try:
            # Stage 1: validation (no files created).
            report = validate_input(input_file, output_file, config)

            with RunRegistry() as registry:
                # Stage 2: run generation.
                t1_start = time.perf_counter()
                runs, segment_stats = generate_runs(input_file, config, registry)
                t1 = time.perf_counter() - t1_start
                logger.info("Segmenting done: %d runs in %.2fs", segment_stats.runs_written, t1)

                # Stage 3: k-way merge.
                t2_start = time.perf_counter()
                merge_stats = merge_runs(runs, output_file, config, self.strategy)
                t2 = time.perf_counter() - t2_start
                logger.info(
                    "Merge done: %d records written in %.2fs", merge_stats.records_written, t2
                )
        except OSError as exc:
            raise SortIOError(f"I/O failure while sorting {input_file}: {exc}") from exc

        total_time = time.perf_counter() - total_start
        logger.info(
            "Result: %d records sorted into %s (total %.2fs)",
            report.record_count,
            output_file,
            total_time,
        )
        return SortResult(
            input_path=input_file,
            output_path=output_file,
            record_count=report.record_count,
            segment_stats=segment_stats,
            merge_stats=merge_stats,
            elapsed=total_time,
        )


def sort_file(
    input_path: str | Path,
    output_path: str | Path,
    config: SortConfig,
    strategy: MergeStrategy = DEFAULT_STRATEGY,
) -> SortResult:
    """Sort one file with a throwaway job."""
    return SortJob(config, strategy).sort(input_path, output_path)


def check_disjoint(pairs: list[tuple[Path, Path]]) -> None:
    """
    Reject batches whose sorts would touch the same files.

    Run files are named after the input stem and suffix, so two inputs in
    one directory that differ only in a missing ``.txt`` suffix collide too.
    An output may not be another pair's input or one of its run files.
    """
    run_prefixes: dict[tuple[Path, str, str], Path] = {}
    outputs: dict[Path, Path] = {}

    for input_file, output_file in pairs:
        resolved = input_file.resolve()
        key = (resolved.parent, resolved.stem, resolved.suffix or DEFAULT_RUN_SUFFIX)
        if key in run_prefixes:
            raise ValueError(
                f"Inputs {run_prefixes[key]} and {input_file} would share temporary run files"
            )
        run_prefixes[key] = input_file

        resolved_output = output_file.resolve()
        if resolved_output in outputs:
            raise ValueError(
                f"Inputs {outputs[resolved_output]} and {input_file} share output {output_file}"
            )
        outputs[resolved_output] = input_file

    for output_file, owner in outputs.items():
        for input_file, _ in pairs:
            if input_file == owner:
                continue
            if output_file == input_file.resolve() or is_run_path(input_file, output_file):
                raise ValueError(
                    f"Output {output_file} of {owner} would overwrite files of {input_file}"
                )


def sort_many(
    job: SortJob,
    pairs: Iterable[tuple[str | Path, str | Path]],
    executor: str | None = None,
    workers: int | None = None,
) -> list[SortResult]:
    """
    Run several independent sorts side by side.

    Each sort runs its stages sequentially; only whole sorts overlap. The
    first failure is raised after every submitted sort has finished, and
    each failed sort has already removed its own runs.

    Returns:
        Results in the order of ``pairs``.
    """
    path_pairs = [(Path(i), Path(o)) for i, o in pairs]
    check_disjoint(path_pairs)

    executor_class = get_executor_class(executor)
    executor_name = describe_executor(executor_class)
    workers_desc = "auto" if workers is None else str(workers)
    logger.info(
        "Sorting %d files: executor=%s, workers=%s",
        len(path_pairs),
        executor_name,
        workers_desc,
    )

    inputs = [input_file for input_file, _ in path_pairs]
    outputs = [output_file for _, output_file in path_pairs]

    if executor_class is None:
        return [job.sort(i, o) for i, o in path_pairs]

    with executor_class(max_workers=workers) as pool:
        return list(pool.map(job.sort, inputs, outputs))
