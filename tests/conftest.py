"""Shared fixtures for the peakfinder test suite."""

from __future__ import annotations

import numpy as np
import pytest


@pytest.fixture
def simple_series() -> list[float]:
    """Two isolated single-sample peaks at indices 2 (height 3) and 4 (height 5)."""
    return [1.0, 2.0, 3.0, 0.0, 5.0, 0.0]


@pytest.fixture
def plateau_series() -> list[float]:
    """Plateaus ``[2, 5)`` at height 3 and ``[6, 8)`` at height 5."""
    return [1.0, 2.0, 3.0, 3.0, 3.0, 0.0, 5.0, 5.0, 0.0]


@pytest.fixture
def spread_series() -> list[int]:
    """Peaks at 1 (height 10), 11 (height 9) and 3 (height 8) for distance tests."""
    return [0, 10, 0, 8, 0, 0, 0, 0, 0, 0, 0, 9, 0]


@pytest.fixture
def oil_prices() -> np.ndarray:
    """Monthly oil price series with many small local maxima."""
    return np.array(
        [
            78.34, 79.12, 80.12, 80.36, 82.21, 81.43, 81.07, 83.87, 84.9, 84.26,
            86.37, 86.51, 88.62, 87.81, 85.62, 87.98, 85.73, 86.99, 88.45, 88.55,
            89.74, 89.67, 89.46, 89.08, 91.23, 93.06, 92.65, 90.98, 91.66, 91.13,
            95.97, 95.76, 93.25, 92.5, 90.32, 91.62, 94.52, 93.53, 94.97, 97.45,
            98.6, 98.5, 107.29, 115.59, 113.2, 127.9, 123.42, 129.9, 113.62, 110.93,
            109.72, 104.08, 100.4, 99.38, 104.31, 107.33, 114.25, 111.93, 119.18,
            114.03, 113.72, 107.35, 109.18, 110.38, 104.68, 103.47, 109.53, 105.46,
            101.5, 101.36, 101.03, 99.0, 105.33, 108.14, 113.0, 112.73, 108.17,
            107.54, 108.19, 104.79, 102.42, 105.46, 104.56, 107.0, 106.74,
        ]
    )


@pytest.fixture
def noisy_spectrum() -> tuple[np.ndarray, np.ndarray]:
    """Gaussian lines on a noisy background.

    Returns
    -------
    x : numpy.ndarray
        Energy axis.
    y : numpy.ndarray
        Counts.
    """
    rng = np.random.default_rng(123)
    x = np.linspace(0.0, 100.0, 1001)
    y = rng.normal(0.0, 0.05, size=x.size)
    for center, amp in [(20.0, 5.0), (45.0, 8.0), (70.0, 4.0)]:
        y += amp * np.exp(-0.5 * ((x - center) / 0.8) ** 2)
    return x, y
