"""
Sacred resonance correction: a decorative value logged once per run.

value = 3.69 * (n mod 12), n drawn uniformly from [0, 100).
Nothing reads the result; it only ends up in framework.log.
"""

from __future__ import annotations

import numpy as np

from src.utils.framework_logger import FrameworkLogger

RESONANCE_FACTOR = 3.69
RESONANCE_MODULUS = 12
DRAW_HIGH = 100  # exclusive


def resonance_value(n: int) -> float:
    return round(RESONANCE_FACTOR * (int(n) % RESONANCE_MODULUS), 2)


def allowed_values() -> np.ndarray:
    """All values the correction can produce (0.0 .. 40.59)."""
    return np.round(RESONANCE_FACTOR * np.arange(RESONANCE_MODULUS), 2)


def sacred_resonance_correction(
    logger: FrameworkLogger,
    rng: np.random.Generator | None = None,
) -> float:
    if rng is None:
        rng = np.random.default_rng()
    n = int(rng.integers(0, DRAW_HIGH))
    value = resonance_value(n)
    logger.log(f"Sacred resonance correction applied: {value:.2f}")
    return value
