"""K-way merge of sorted runs into the final output file."""

import logging
from collections.abc import Sequence
from contextlib import ExitStack
from pathlib import Path

from external_merge_sort.merge.cursor import open_cursor
from external_merge_sort.merge.selection import get_merge_function
from external_merge_sort.merge.types import DEFAULT_STRATEGY, MergeStats, MergeStrategy
from external_merge_sort.records import BUFFER_SIZE, SortConfig, encode_record
from external_merge_sort.segment import RunRegistry

logger = logging.getLogger(__name__)


def merge_runs(
    run_paths: Sequence[str | Path],
    output_path: str | Path,
    config: SortConfig,
    strategy: MergeStrategy = DEFAULT_STRATEGY,
) -> MergeStats:
    """
    Merge sorted runs into ``output_path`` and delete the runs.

    Whatever happens, every run handle is closed, then the output handle,
    then every run file is deleted. If merging fails the partial output is
    removed as well, so a failed merge never leaves a truncated result.

    Args:
        run_paths: Sorted run files, in segment order. Ties between runs are
            resolved in favour of the earlier run.
        output_path: Destination file; created or truncated.
        config: Record width used for every read and write.
        strategy: "heap" or "linear" minimum selection; output is identical.

    Returns:
        Merge statistics.
    """
    output_file = Path(output_path)
    paths = [Path(p) for p in run_paths]
    stats = MergeStats(runs_merged=len(paths))

    with RunRegistry() as registry:
        for path in paths:
            registry.register(path)

        merge = get_merge_function(strategy)
        output_created = False
        try:
            with ExitStack() as stack:
                output = stack.enter_context(open(output_file, "wb", buffering=BUFFER_SIZE))
                output_created = True
                cursors = [
                    open_cursor(index, stack.enter_context(open(path, "rb")), config.record_width)
                    for index, path in enumerate(paths)
                ]

                for record in merge(cursors):
                    output.write(encode_record(record, config))
                    stats.records_written += 1
        except BaseException:
            if output_created:
                logger.warning("Merge into %s failed, removing partial output", output_file)
                try:
                    output_file.unlink(missing_ok=True)
                except OSError as exc:
                    logger.warning("Could not remove partial output %s: %s", output_file, exc)
            raise

    logger.debug(
        "Merged %d runs into %s (%d records, strategy=%s)",
        stats.runs_merged,
        output_file.name,
        stats.records_written,
        strategy,
    )
    return stats
