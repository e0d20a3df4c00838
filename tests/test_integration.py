"""Integration tests: end-to-end detection on realistic series."""

from __future__ import annotations

import numpy as np

from peakfinder import PeakFinder, find_peaks, peak_table, sort_by_position


class TestOilPrices:
    """Prominence plus distance filtering on a noisy price series."""

    def test_prominence_and_distance(self, oil_prices):
        peaks = PeakFinder(oil_prices).with_min_prominence(1.0).with_min_distance(18).find_peaks()

        assert peaks
        # global maximum ranks first
        assert peaks[0].middle_position() == int(np.argmax(oil_prices))
        for a, b in zip(peaks, peaks[1:]):
            assert abs(a.middle_position() - b.middle_position()) >= 18
        assert all(p.prominence >= 1.0 for p in peaks)
        heights = [oil_prices[p.start] for p in peaks]
        assert heights == sorted(heights, reverse=True)

    def test_distance_reduces_count(self, oil_prices):
        base = PeakFinder(oil_prices).with_min_prominence(1.0)
        dense = base.find_peaks()
        sparse = base.with_min_distance(18).find_peaks()
        assert 0 < len(sparse) < len(dense)


class TestNoisySpectrum:
    """Gaussian lines survive a prominence threshold on a noisy background."""

    def test_lines_detected(self, noisy_spectrum):
        x, y = noisy_spectrum
        peaks = find_peaks(y, x, config={"prominence": 2.0, "distance": 5.0})
        table = peak_table(sort_by_position(peaks), x)

        assert table["positions"].size == 3
        np.testing.assert_allclose(table["positions"], [20.0, 45.0, 70.0], atol=0.5)
        assert table["prominences"] is not None

    def test_strongest_line_first(self, noisy_spectrum):
        x, y = noisy_spectrum
        peaks = find_peaks(y, x, config={"height": 1.0})
        assert abs(x[peaks[0].middle_position()] - 45.0) < 0.5
