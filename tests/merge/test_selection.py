"""Tests for merge cursors and minimum selection."""

import io

import pytest

from external_merge_sort.merge import merge_heap, merge_linear, open_cursor, select_linear
from external_merge_sort.merge.selection import get_merge_function


def make_cursors(*runs: bytes):
    return [open_cursor(index, io.BytesIO(data), 7) for index, data in enumerate(runs)]


class TestMergeCursor:
    """Test cases for MergeCursor."""

    def test_opens_on_first_record(self) -> None:
        cursor = make_cursors(b"alice\r\ncharl\r\n")[0]
        assert cursor.current == "alice"
        assert cursor.offset == 7
        assert not cursor.exhausted

    def test_empty_run_starts_exhausted(self) -> None:
        cursor = make_cursors(b"")[0]
        assert cursor.exhausted

    def test_advance_until_exhausted(self) -> None:
        cursor = make_cursors(b"alice\r\ncharl\r\n")[0]
        cursor.advance()
        assert cursor.current == "charl"
        assert cursor.offset == 14
        cursor.advance()
        assert cursor.exhausted


class TestSelectLinear:
    """Test cases for select_linear function."""

    def test_picks_smallest(self) -> None:
        cursors = make_cursors(b"charl\r\n", b"alice\r\n", b"brian\r\n")
        assert select_linear(cursors) == 1

    def test_ties_go_to_lowest_run(self) -> None:
        cursors = make_cursors(b"brian\r\n", b"apple\r\n", b"apple\r\n")
        assert select_linear(cursors) == 1

    def test_skips_exhausted_cursors(self) -> None:
        cursors = make_cursors(b"", b"danie\r\n")
        assert select_linear(cursors) == 1

    def test_none_when_all_exhausted(self) -> None:
        assert select_linear(make_cursors(b"", b"")) is None
        assert select_linear([]) is None


@pytest.mark.parametrize("merge", [merge_linear, merge_heap])
class TestMergeFunctions:
    """Test cases shared by both merge strategies."""

    def test_merges_in_order(self, merge) -> None:
        cursors = make_cursors(b"alice\r\ncharl\r\n", b"brian\r\ndanie\r\n")
        assert list(merge(cursors)) == ["alice", "brian", "charl", "danie"]

    def test_keeps_equal_records_adjacent(self, merge) -> None:
        cursors = make_cursors(b"apple\r\nzebra\r\n", b"apple\r\nmango\r\n")
        assert list(merge(cursors)) == ["apple", "apple", "mango", "zebra"]

    def test_tolerates_empty_runs(self, merge) -> None:
        cursors = make_cursors(b"", b"brian\r\n", b"")
        assert list(merge(cursors)) == ["brian"]

    def test_no_runs(self, merge) -> None:
        assert list(merge([])) == []


def test_heap_and_linear_pop_the_same_runs() -> None:
    """Test that both strategies consume runs in the same order on ties."""
    runs = (b"apple\r\napple\r\n", b"apple\r\nbrian\r\n", b"aaaaa\r\napple\r\n")

    linear_cursors = make_cursors(*runs)
    heap_cursors = make_cursors(*runs)

    linear_order = []
    for _ in merge_linear(linear_cursors):
        linear_order.append([c.offset for c in linear_cursors])
    heap_order = []
    for _ in merge_heap(heap_cursors):
        heap_order.append([c.offset for c in heap_cursors])

    assert linear_order == heap_order


def test_unknown_strategy() -> None:
    with pytest.raises(ValueError, match="Unknown merge strategy"):
        get_merge_function("bubble")  # type: ignore[arg-type]
