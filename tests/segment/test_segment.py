"""Tests for run generation."""

import io
import tempfile
from pathlib import Path

import pytest

from external_merge_sort.records import SortConfig
from external_merge_sort.segment import (
    RunRegistry,
    generate_runs,
    read_window,
    run_glob,
    run_path,
    segment,
    write_run,
)

CONFIG = SortConfig(max_file_size_bytes=1000, records_per_segment=2, record_width=7)


class TestRunPath:
    """Test cases for run-file naming."""

    def test_keeps_stem_and_suffix(self) -> None:
        assert run_path(Path("data/input.txt"), 0) == Path("data/input-temp-0.txt")
        assert run_path(Path("data/input.dat"), 12) == Path("data/input-temp-12.dat")

    def test_defaults_to_txt_suffix(self) -> None:
        assert run_path(Path("data/input"), 3) == Path("data/input-temp-3.txt")

    def test_glob_matches_generated_names(self) -> None:
        assert Path("input-temp-7.txt").match(run_glob(Path("data/input.txt")))
        assert not Path("other-temp-7.txt").match(run_glob(Path("data/input.txt")))


class TestReadWindow:
    """Test cases for read_window function."""

    def test_reads_full_window(self) -> None:
        handle = io.BytesIO(b"charl\r\nalice\r\nbrian\r\ndanie\r\n")
        assert read_window(handle, 0, CONFIG) == ["charl", "alice"]
        assert read_window(handle, 14, CONFIG) == ["brian", "danie"]

    def test_short_final_window(self) -> None:
        handle = io.BytesIO(b"charl\r\nalice\r\nbrian\r\n")
        assert read_window(handle, 14, CONFIG) == ["brian"]

    def test_empty_at_end_of_file(self) -> None:
        handle = io.BytesIO(b"charl\r\nalice\r\n")
        assert read_window(handle, 14, CONFIG) == []


class TestGenerateRuns:
    """Test cases for generate_runs function."""

    def test_writes_one_sorted_run_per_window(self) -> None:
        """Test the two-window example: each run is sorted on its own."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            input_path = Path(tmp_dir) / "names.txt"
            input_path.write_bytes(b"charl\r\nalice\r\nbrian\r\ndanie\r\n")

            with RunRegistry() as registry:
                runs, stats = generate_runs(input_path, CONFIG, registry)

                assert runs == [
                    Path(tmp_dir) / "names-temp-0.txt",
                    Path(tmp_dir) / "names-temp-1.txt",
                ]
                assert runs[0].read_bytes() == b"alice\r\ncharl\r\n"
                assert runs[1].read_bytes() == b"brian\r\ndanie\r\n"
                assert registry.paths == runs

            assert stats.runs_written == 2
            assert stats.records_read == 4
            assert stats.bytes_read == 28
            assert not any(path.exists() for path in runs)

    def test_every_run_byte_is_fixed_width(self) -> None:
        config = SortConfig(max_file_size_bytes=1000, records_per_segment=3, record_width=7)
        with tempfile.TemporaryDirectory() as tmp_dir:
            input_path = Path(tmp_dir) / "names.txt"
            input_path.write_bytes(b"zzzzz\r\nyyyyy\r\nxxxxx\r\nccccc\r\nbbbbb\r\naaaaa\r\n")

            with RunRegistry() as registry:
                runs, _stats = generate_runs(input_path, config, registry)
                for run in runs:
                    assert run.stat().st_size == 3 * 7

    def test_empty_input_produces_no_runs(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            input_path = Path(tmp_dir) / "empty.txt"
            input_path.write_bytes(b"")

            with RunRegistry() as registry:
                runs, stats = generate_runs(input_path, CONFIG, registry)

            assert runs == []
            assert stats.runs_written == 0

    def test_failed_write_leaves_no_runs(self, monkeypatch) -> None:
        """Test that runs created before a write failure are deleted by the registry."""
        original_write_run = segment.write_run
        calls = 0

        def failing_write_run(records, path, config) -> None:
            nonlocal calls
            calls += 1
            if calls == 2:
                path.write_bytes(b"parti")
                raise OSError("disk full")
            original_write_run(records, path, config)

        monkeypatch.setattr(segment, "write_run", failing_write_run)

        with tempfile.TemporaryDirectory() as tmp_dir:
            input_path = Path(tmp_dir) / "names.txt"
            input_path.write_bytes(b"charl\r\nalice\r\nbrian\r\ndanie\r\n")

            with pytest.raises(OSError, match="disk full"), RunRegistry() as registry:
                generate_runs(input_path, CONFIG, registry)

            assert sorted(p.name for p in Path(tmp_dir).iterdir()) == ["names.txt"]


def test_write_run_pads_records() -> None:
    with tempfile.TemporaryDirectory() as tmp_dir:
        path = Path(tmp_dir) / "run.txt"
        write_run(["abc", "abcde"], path, CONFIG)
        assert path.read_bytes() == b"abc  \r\nabcde\r\n"
