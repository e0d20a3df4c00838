#!/usr/bin/env python3
"""Basic peakfinder usage: prominent, well-separated peaks in a price series.

This example runs the finder on a monthly oil price series and prints the
accepted peaks in position order.
"""

import numpy as np

from peakfinder import PeakFinder, sort_by_position

prices = np.array(
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

peaks = (
    PeakFinder(prices)
    .with_min_height(0.0)
    .with_min_prominence(1.0)
    .with_min_distance(18)
    .find_peaks()
)

print(f"Detected {len(peaks)} peaks:")
for peak in sort_by_position(peaks):
    print(
        f"  month {peak.middle_position():3d}  price = {peak.height:7.2f}"
        f"  prominence = {peak.prominence:6.2f}"
    )
