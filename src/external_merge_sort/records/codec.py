"""Encoding, decoding and positional reads of fixed-width records."""

import os
from typing import BinaryIO

from external_merge_sort.records.types import ENCODING, TERMINATOR, Record, SortConfig


def decode_record(raw: bytes) -> Record:
    """Decode one raw record into its trimmed payload."""
    return raw.decode(ENCODING).strip()


def encode_record(record: Record, config: SortConfig) -> bytes:
    """Encode a payload as exactly ``config.record_width`` bytes."""
    return record.ljust(config.payload_width).encode(ENCODING) + TERMINATOR


def is_well_formed(raw: bytes, config: SortConfig) -> bool:
    """
    Check that one raw chunk is a complete record.

    The chunk must be exactly ``record_width`` bytes, end with the terminator,
    and carry a payload that still fills ``payload_width`` after trimming.
    """
    if len(raw) != config.record_width or not raw.endswith(TERMINATOR):
        return False
    return len(decode_record(raw)) == config.payload_width


def read_record_at(handle: BinaryIO, offset: int, width: int) -> bytes:
    """Read up to ``width`` bytes at ``offset``. Returns b"" at end of file."""
    handle.seek(offset)
    return handle.read(width)


def read_records_at(handle: BinaryIO, offset: int, count: int, width: int) -> list[bytes]:
    """
    Read up to ``count`` consecutive raw records starting at ``offset``.

    The read never asks for more than the bytes left in the file, so a large
    ``count`` near end of file does not allocate a large buffer.
    """
    remaining = max(handle.seek(0, os.SEEK_END) - offset, 0)
    handle.seek(offset)
    data = handle.read(min(count * width, remaining))
    return [data[start : start + width] for start in range(0, len(data), width)]
