"""Fixed-width record format."""

from external_merge_sort.records.codec import (
    decode_record,
    encode_record,
    is_well_formed,
    read_record_at,
    read_records_at,
)
from external_merge_sort.records.types import (
    BUFFER_SIZE,
    ENCODING,
    EXHAUSTED,
    TERMINATOR,
    TERMINATOR_WIDTH,
    Record,
    SortConfig,
)

__all__ = [
    "BUFFER_SIZE",
    "ENCODING",
    "EXHAUSTED",
    "TERMINATOR",
    "TERMINATOR_WIDTH",
    "Record",
    "SortConfig",
    "decode_record",
    "encode_record",
    "is_well_formed",
    "read_record_at",
    "read_records_at",
]
