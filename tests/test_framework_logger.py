#!/usr/bin/env python3
"""
Unit tests for FrameworkLogger: line format, append-only behaviour, console mirror.
"""
from __future__ import annotations

import re
from datetime import datetime

import pytest

from src.utils.framework_logger import FrameworkLogger, format_log_line

LINE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2} - .*$")


class TestFormat:
    def test_fixed_timestamp(self):
        ts = datetime(2026, 2, 1, 8, 5, 9)
        assert format_log_line("hello", ts) == "2026-02-01 08:05:09 - hello"

    def test_now_matches_pattern(self):
        assert LINE_PATTERN.match(format_log_line("x"))


class TestFrameworkLogger:
    def test_each_call_appends_one_line(self, tmp_path, capsys):
        log_file = tmp_path / "framework.log"
        log_file.touch()
        logger = FrameworkLogger(log_file)
        for i in range(3):
            logger.log(f"event {i}")
            assert logger.line_count() == i + 1
        lines = log_file.read_text(encoding="utf-8").splitlines()
        assert [l.split(" - ", 1)[1] for l in lines] == ["event 0", "event 1", "event 2"]
        assert all(LINE_PATTERN.match(l) for l in lines)
        out = capsys.readouterr().out.splitlines()
        assert out == lines

    def test_prior_lines_untouched(self, tmp_path):
        log_file = tmp_path / "framework.log"
        log_file.write_text("2026-01-01 00:00:00 - first\n", encoding="utf-8")
        FrameworkLogger(log_file).log("second")
        lines = log_file.read_text(encoding="utf-8").splitlines()
        assert lines[0] == "2026-01-01 00:00:00 - first"
        assert lines[1].endswith(" - second")

    def test_missing_directory_is_fatal(self, tmp_path):
        logger = FrameworkLogger(tmp_path / "missing" / "framework.log")
        with pytest.raises(FileNotFoundError):
            logger.log("boom")
        assert logger.line_count() == 0
