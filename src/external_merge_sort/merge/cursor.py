"""Per-run read position during the merge."""

from dataclasses import dataclass
from typing import BinaryIO

from external_merge_sort.records import EXHAUSTED, Record, decode_record, read_record_at


@dataclass(slots=True)
class MergeCursor:
    """Next unread offset and buffered record of one open run."""

    run_index: int
    handle: BinaryIO
    width: int
    offset: int = 0
    current: Record = EXHAUSTED

    @property
    def exhausted(self) -> bool:
        return self.current == EXHAUSTED

    def advance(self) -> None:
        """Buffer the record at the current offset, or mark the run exhausted."""
        raw = read_record_at(self.handle, self.offset, self.width)
        if not raw:
            self.current = EXHAUSTED
            return

        self.current = decode_record(raw)
        self.offset += self.width


def open_cursor(run_index: int, handle: BinaryIO, width: int) -> MergeCursor:
    """Create a cursor already holding the first record of its run."""
    cursor = MergeCursor(run_index=run_index, handle=handle, width=width)
    cursor.advance()
    return cursor
