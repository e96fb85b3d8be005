"""
Random fixed-width record file generator.

Writes files that pass validation: every record is a full-width payload drawn
from a printable alphabet followed by the 2-byte terminator. Useful for
benchmarks and for building large test inputs.
"""

import argparse
import random
import string
import sys

from external_merge_sort.records import BUFFER_SIZE, TERMINATOR, TERMINATOR_WIDTH, SortConfig

DEFAULT_ALPHABET = string.ascii_lowercase


def generate_payload(payload_width: int, alphabet: str, rng: random.Random) -> str:
    return "".join(rng.choices(alphabet, k=payload_width))


def generate_records_file(
    output_path: str,
    records: int,
    payload_width: int,
    seed: int = 1,
    alphabet: str = DEFAULT_ALPHABET,
) -> int:
    """
    Generate a file of random fixed-width records.

    Streams output record-by-record to avoid memory issues.

    Args:
        output_path: Path to output file.
        records: Number of records to write.
        payload_width: Characters per record, excluding the terminator.
        seed: Random seed for reproducibility.
        alphabet: Characters payloads are drawn from; must not contain whitespace.

    Returns:
        Total number of bytes written.
    """
    if payload_width < 1:
        raise ValueError(f"payload_width must be at least 1, got {payload_width}")
    if not alphabet or any(ch.isspace() for ch in alphabet):
        raise ValueError("alphabet must be non-empty and contain no whitespace")

    rng = random.Random(seed)
    terminator = TERMINATOR.decode("ascii")
    total_bytes = 0

    with open(output_path, "w", encoding="latin-1", newline="", buffering=BUFFER_SIZE) as f:
        for i in range(records):
            f.write(generate_payload(payload_width, alphabet, rng) + terminator)
            total_bytes += payload_width + TERMINATOR_WIDTH

            # Progress indicator every 1M records
            if (i + 1) % 1_000_000 == 0:
                print(f"  Generated {i + 1}/{records} records...", file=sys.stderr)

    return total_bytes


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Generate a random fixed-width record file.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 100k records of 5 characters (7 bytes with terminator)
  external-merge-sort-generate --out data/input.txt --records 100000

  # Wider records
  external-merge-sort-generate --out data/wide.txt --records 100000 --record-width 34
""",
    )

    parser.add_argument(
        "--out",
        required=True,
        help="Output file path",
    )
    parser.add_argument(
        "--records",
        type=int,
        default=100000,
        help="Number of records (default: 100000)",
    )
    parser.add_argument(
        "--record-width",
        type=int,
        default=7,
        help="Bytes per record including the terminator (default: 7)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=1,
        help="Random seed for reproducibility (default: 1)",
    )

    args = parser.parse_args()

    # Validate
    if args.records < 0:
        parser.error("--records must be non-negative")
    try:
        config = SortConfig(
            max_file_size_bytes=args.records * args.record_width,
            records_per_segment=1,
            record_width=args.record_width,
        )
    except ValueError as exc:
        parser.error(str(exc))

    print(f"Output: {args.out}", file=sys.stderr)
    print(f"Records: {args.records:,} x {args.record_width} bytes", file=sys.stderr)
    print(f"Seed: {args.seed}", file=sys.stderr)

    total_bytes = generate_records_file(
        output_path=args.out,
        records=args.records,
        payload_width=config.payload_width,
        seed=args.seed,
    )

    print(f"Done! Wrote {total_bytes:,} bytes to {args.out}", file=sys.stderr)


if __name__ == "__main__":
    main()
