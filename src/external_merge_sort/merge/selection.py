"""Selection of the next output record across all merge cursors."""

import heapq
from collections.abc import Callable, Iterator, Sequence

from external_merge_sort.merge.cursor import MergeCursor
from external_merge_sort.merge.types import MergeStrategy
from external_merge_sort.records import Record


def select_linear(cursors: Sequence[MergeCursor]) -> int | None:
    """
    Return the position of the cursor holding the smallest record.

    Scans every cursor. Ties go to the earliest cursor. Returns None once
    all cursors are exhausted.
    """
    best: int | None = None
    for position, cursor in enumerate(cursors):
        if cursor.exhausted:
            continue
        if best is None or cursor.current < cursors[best].current:
            best = position
    return best


def merge_linear(cursors: Sequence[MergeCursor]) -> Iterator[Record]:
    """Yield records in order using an O(k) scan per record."""
    while (position := select_linear(cursors)) is not None:
        cursor = cursors[position]
        yield cursor.current
        cursor.advance()


def merge_heap(cursors: Sequence[MergeCursor]) -> Iterator[Record]:
    """
    Yield records in order using a binary heap of (record, run_index).

    Equal records pop lowest run index first, matching merge_linear.
    """
    by_index = {cursor.run_index: cursor for cursor in cursors}
    heap = [(cursor.current, cursor.run_index) for cursor in cursors if not cursor.exhausted]
    heapq.heapify(heap)

    while heap:
        record, run_index = heap[0]
        yield record

        cursor = by_index[run_index]
        cursor.advance()
        if cursor.exhausted:
            heapq.heappop(heap)
        else:
            heapq.heapreplace(heap, (cursor.current, run_index))


MERGE_STRATEGIES: dict[str, Callable[[Sequence[MergeCursor]], Iterator[Record]]] = {
    "heap": merge_heap,
    "linear": merge_linear,
}


def get_merge_function(
    strategy: MergeStrategy,
) -> Callable[[Sequence[MergeCursor]], Iterator[Record]]:
    """Look up a merge strategy by name."""
    try:
        return MERGE_STRATEGIES[strategy]
    except KeyError:
        choices = ", ".join(sorted(MERGE_STRATEGIES))
        raise ValueError(
            f"Unknown merge strategy {strategy!r}, expected one of: {choices}"
        ) from None
