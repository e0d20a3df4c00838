#!/usr/bin/env python3
"""Parameter tuning: sweep the minimum distance and compare peak counts.

Larger distances keep only the highest peak in each neighbourhood; the
prominence threshold removes noise maxima first.
"""

import numpy as np

from peakfinder import PeakFinder, peak_table, sort_by_position

# Noisy spectrum with lines of decreasing amplitude
rng = np.random.default_rng(42)
energy = np.linspace(0.0, 200.0, 4001)
counts = rng.normal(0.0, 0.1, size=energy.size)
for center, amp in [(15.0, 20.0), (40.0, 10.0), (75.0, 5.0), (125.0, 3.0), (175.0, 2.0)]:
    counts += amp * np.exp(-0.5 * ((energy - center) / 1.5) ** 2)

print(f"{'dist':>6}  {'Peaks':>5}  Detected positions")
print("-" * 60)

for distance in [0.0, 10.0, 30.0, 50.0, 100.0]:
    finder = PeakFinder(counts, energy).with_min_prominence(1.0)
    if distance > 0:
        finder.with_min_distance(distance)
    table = peak_table(sort_by_position(finder.find_peaks()), energy)
    positions = ", ".join(f"{x:.1f}" for x in table["positions"])
    print(f"{distance:6.1f}  {table['positions'].size:5d}  {positions}")
