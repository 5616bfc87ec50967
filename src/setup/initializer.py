"""
Environment initializer: idempotent creation of the framework tree.

Order is fixed: directories (root first) -> log file -> placeholder scripts ->
README -> short pause. Directories and the log file are create-if-absent, scripts
are always overwritten, the README is write-once-if-missing.
"""

from __future__ import annotations

import time
from pathlib import Path

from src.config.paths import (
    INIT_PAUSE_S,
    PLACEHOLDER_SCRIPTS,
    README_TEXT,
    FrameworkPaths,
    PlaceholderScript,
)
from src.utils.framework_logger import FrameworkLogger


def ensure_directory(path: Path) -> bool:
    """Create path (and parents) if missing. Returns True if it was created."""
    path = Path(path)
    if path.is_dir():
        return False
    path.mkdir(parents=True, exist_ok=True)
    return True


def ensure_directories(paths: FrameworkPaths) -> list[Path]:
    return [d for d in paths.directories() if ensure_directory(d)]


def ensure_log_file(paths: FrameworkPaths) -> bool:
    """Create an empty log file if absent. logs/ must already exist."""
    if paths.log_file.exists():
        return False
    paths.log_file.touch()
    return True


def write_placeholder_scripts(
    paths: FrameworkPaths,
    logger: FrameworkLogger,
    scripts: tuple[PlaceholderScript, ...] = PLACEHOLDER_SCRIPTS,
) -> dict[str, bool]:
    """
    Overwrite every placeholder script with its template, then verify it exists.

    A failed verification is logged and does not stop the remaining scripts.
    Returns {script name: verified}.
    """
    results: dict[str, bool] = {}
    for script in scripts:
        target = paths.script_path(script.name)
        with open(target, "w", encoding="utf-8") as f:
            f.write(script.body)
        ok = target.is_file()
        if ok:
            logger.log(f"Script created: {script.name}")
        else:
            logger.log(f"Failed to create script: {script.name}")
        results[script.name] = ok
    return results


def write_readme(paths: FrameworkPaths, logger: FrameworkLogger, text: str = README_TEXT) -> bool:
    """Write docs/README.md only if it does not exist yet. Returns True if written."""
    readme = paths.readme_path
    if readme.exists():
        return False
    with open(readme, "w", encoding="utf-8") as f:
        f.write(text)
    logger.log(f"README created: {readme.relative_to(paths.root).as_posix()}")
    return True


def initialize_environment(
    paths: FrameworkPaths,
    logger: FrameworkLogger | None = None,
    pause_s: float = INIT_PAUSE_S,
) -> FrameworkLogger:
    """Build the framework tree under paths.root and return the logger bound to it."""
    ensure_directories(paths)
    ensure_log_file(paths)
    if logger is None:
        logger = FrameworkLogger(paths.log_file)

    logger.log(f"Initializing environment at {paths.root}")
    write_placeholder_scripts(paths, logger)
    write_readme(paths, logger)
    logger.log("Environment initialized")

    if pause_s > 0:
        time.sleep(pause_s)
    return logger
