"""
Framework log parser: load logs/framework.log into a DataFrame.

Each valid line looks like `2026-10-18 14:03:22 - Script created: image_generation.py`.
Lines that do not match (blank lines, child process output pasted by hand, etc.)
are skipped.

Usage:
    python -m src.parser.log_parser                       # default framework/logs/framework.log
    python -m src.parser.log_parser path/to/framework.log
"""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path

import pandas as pd

from src.config.paths import DEFAULT_ROOT, LOG_TIME_FORMAT, FrameworkPaths

LINE_RE = re.compile(r"^(\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}) - (.*)$")
RESONANCE_RE = re.compile(r"^Sacred resonance correction applied: (\d+(?:\.\d+)?)$")
RUN_START_PREFIX = "Initializing environment"


def parse_framework_log(path: str | Path) -> pd.DataFrame:
    """Return a DataFrame with `timestamp` (datetime64) and `message` columns."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Framework log not found: {path}")

    rows = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            m = LINE_RE.match(line.rstrip("\n"))
            if m:
                rows.append((m.group(1), m.group(2)))

    df = pd.DataFrame(rows, columns=["timestamp", "message"])
    df["timestamp"] = pd.to_datetime(df["timestamp"], format=LOG_TIME_FORMAT)
    return df


def extract_resonance_values(df: pd.DataFrame) -> pd.Series:
    values = df["message"].str.extract(RESONANCE_RE, expand=False).dropna()
    return values.astype(float).reset_index(drop=True)


def summarize_log(df: pd.DataFrame) -> dict:
    resonance = extract_resonance_values(df)
    return {
        "lines": int(len(df)),
        "first": df["timestamp"].min() if len(df) else None,
        "last": df["timestamp"].max() if len(df) else None,
        "runs": int(df["message"].str.startswith(RUN_START_PREFIX).sum()),
        "resonance_values": resonance.tolist(),
    }


def main() -> int:
    default_log = FrameworkPaths.from_root(DEFAULT_ROOT).log_file
    parser = argparse.ArgumentParser(description="Summarize a framework log")
    parser.add_argument("log_path", nargs="?", type=Path, default=default_log, help="framework.log path")
    args = parser.parse_args()

    try:
        df = parse_framework_log(args.log_path)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    summary = summarize_log(df)
    print(f"Log: {args.log_path}")
    print(f"  Lines:      {summary['lines']}")
    print(f"  Runs:       {summary['runs']}")
    print(f"  First:      {summary['first']}")
    print(f"  Last:       {summary['last']}")
    print(f"  Resonance:  {summary['resonance_values']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
