"""Shared constants and configuration for fixed-width records."""

from dataclasses import dataclass
from typing import TypeAlias

# Every record ends with this 2-byte line terminator.
TERMINATOR = b"\r\n"
TERMINATOR_WIDTH = len(TERMINATOR)

# Single-byte decoding: one byte per character, str order == byte order.
ENCODING = "latin-1"

# Marks a merge cursor whose run has no more records.
EXHAUSTED = ""

# 1MB buffer for efficient I/O.
BUFFER_SIZE = 1024 * 1024

Record: TypeAlias = str


@dataclass(frozen=True, slots=True)
class SortConfig:
    """Immutable settings shared by every stage of one sort job."""

    max_file_size_bytes: int
    records_per_segment: int
    record_width: int

    def __post_init__(self) -> None:
        if self.max_file_size_bytes < 0:
            raise ValueError(
                f"max_file_size_bytes must be non-negative, got {self.max_file_size_bytes}"
            )
        if self.records_per_segment < 1:
            raise ValueError(
                f"records_per_segment must be at least 1, got {self.records_per_segment}"
            )
        if self.record_width <= TERMINATOR_WIDTH:
            raise ValueError(
                f"record_width must exceed the terminator width ({TERMINATOR_WIDTH}), "
                f"got {self.record_width}"
            )

    @property
    def payload_width(self) -> int:
        return self.record_width - TERMINATOR_WIDTH
