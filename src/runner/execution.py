"""
Execution runner: invoke each placeholder script as its own process, in order.

Each call blocks until the child exits (no timeout). Child stdout/stderr are
inherited, so their output interleaves with the framework log on the console.
A missing interpreter or a non-zero exit status is logged and the runner moves
on to the next script.
"""

from __future__ import annotations

import subprocess
import sys
from dataclasses import dataclass

import numpy as np

from src.analysis.resonance import sacred_resonance_correction
from src.config.paths import PLACEHOLDER_SCRIPTS, FrameworkPaths, PlaceholderScript
from src.utils.framework_logger import FrameworkLogger


@dataclass
class ExecutionResult:
    script: str
    returncode: int | None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.returncode == 0


def run_script(
    paths: FrameworkPaths,
    script: PlaceholderScript,
    logger: FrameworkLogger,
    interpreter: str = sys.executable,
) -> ExecutionResult:
    target = paths.script_path(script.name).resolve()
    logger.log(f"Running {script.label}...")
    try:
        proc = subprocess.run([interpreter, str(target)])
    except OSError as e:
        logger.log(f"Could not start {script.name}: {e}")
        return ExecutionResult(script.name, None, str(e))

    if proc.returncode != 0:
        logger.log(f"{script.name} exited with status {proc.returncode}")
    return ExecutionResult(script.name, proc.returncode)


def run_all(
    paths: FrameworkPaths,
    logger: FrameworkLogger,
    interpreter: str = sys.executable,
    scripts: tuple[PlaceholderScript, ...] = PLACEHOLDER_SCRIPTS,
    rng: np.random.Generator | None = None,
) -> list[ExecutionResult]:
    """Run every script in order, apply the resonance correction, log completion."""
    results = [run_script(paths, s, logger, interpreter=interpreter) for s in scripts]
    sacred_resonance_correction(logger, rng=rng)
    logger.log("All modules executed")
    return results
