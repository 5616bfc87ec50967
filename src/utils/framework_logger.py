"""
Framework event log: one `<timestamp> - <message>` line per event, appended to
logs/framework.log and mirrored to the console.

Write in append mode so earlier lines are never touched. The log file must already
exist (see src.setup.initializer.ensure_log_file); a missing logs/ directory is fatal.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from src.config.paths import LOG_TIME_FORMAT


def format_log_line(message: str, ts: datetime | None = None) -> str:
    if ts is None:
        ts = datetime.now()
    return f"{ts.strftime(LOG_TIME_FORMAT)} - {message}"


class FrameworkLogger:
    """Append-only logger bound to a single log file."""

    def __init__(self, log_file: str | Path):
        self.log_file = Path(log_file)

    def log(self, message: str) -> None:
        line = format_log_line(message)
        with open(self.log_file, "a", encoding="utf-8") as f:
            f.write(line + "\n")
        print(line, flush=True)

    def line_count(self) -> int:
        if not self.log_file.exists():
            return 0
        with open(self.log_file, "r", encoding="utf-8") as f:
            return sum(1 for _ in f)
