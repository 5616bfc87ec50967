#!/usr/bin/env python3
"""
Structure check: report which parts of the framework tree exist and whether the
placeholder scripts still match their templates.

Usage:
    python -m src.validation.structure_check            # default root
    python -m src.validation.structure_check /tmp/fw
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import pandas as pd

from src.config.paths import DEFAULT_ROOT, PLACEHOLDER_SCRIPTS, FrameworkPaths


def check_structure(paths: FrameworkPaths) -> pd.DataFrame:
    records = []
    for d in paths.directories():
        name = "." if d == paths.root else d.relative_to(paths.root).as_posix()
        records.append({"name": name, "path": d, "kind": "dir", "exists": d.is_dir(), "matches_template": None})

    for f in (paths.log_file, paths.readme_path):
        records.append(
            {
                "name": f.relative_to(paths.root).as_posix(),
                "path": f,
                "kind": "file",
                "exists": f.is_file(),
                "matches_template": None,
            }
        )

    for script in PLACEHOLDER_SCRIPTS:
        p = paths.script_path(script.name)
        exists = p.is_file()
        matches = exists and p.read_text(encoding="utf-8") == script.body
        records.append(
            {
                "name": p.relative_to(paths.root).as_posix(),
                "path": p,
                "kind": "script",
                "exists": exists,
                "matches_template": matches,
            }
        )

    return pd.DataFrame(records)


def is_complete(report: pd.DataFrame) -> bool:
    scripts = report[report["kind"] == "script"]
    return bool(report["exists"].all() and scripts["matches_template"].all())


def print_report(report: pd.DataFrame) -> None:
    print("=== Framework structure ===")
    for row in report.itertuples(index=False):
        status = "OK" if row.exists else "MISSING"
        if row.kind == "script" and row.exists and not row.matches_template:
            status = "MODIFIED"
        print(f"  {row.name}: {status} ({row.kind})")


def main() -> int:
    parser = argparse.ArgumentParser(description="Check the framework directory tree")
    parser.add_argument("root", nargs="?", type=Path, default=DEFAULT_ROOT, help="Framework root")
    args = parser.parse_args()

    report = check_structure(FrameworkPaths.from_root(args.root))
    print_report(report)
    complete = is_complete(report)
    print("\n=== Done ===" if complete else "\n=== Incomplete ===")
    return 0 if complete else 1


if __name__ == "__main__":
    sys.exit(main())
