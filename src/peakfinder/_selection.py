"""Post-detection helpers for reordering, tabulating and matching peaks.

:meth:`peakfinder.PeakFinder.find_peaks` returns peaks ranked by height.
The helpers here give consumers position order, a columnar numpy view and
nearest-peak lookup.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np

from peakfinder._peak import Peak


def sort_by_position(peaks: Sequence[Peak]) -> list[Peak]:
    """Return *peaks* ordered by ascending plateau start.

    Examples
    --------
    >>> peaks = [Peak(range(4, 5), 5, 5), Peak(range(2, 3), 1, 3)]
    >>> [p.start for p in sort_by_position(peaks)]
    [2, 4]
    """
    return sorted(peaks, key=lambda p: p.start)


def peak_table(
    peaks: Sequence[Peak],
    x_data: Sequence[Any] | None = None,
) -> dict[str, np.ndarray | None]:
    """Return a columnar view of *peaks*, one numpy array per property.

    Parameters
    ----------
    peaks : sequence of Peak
        Peaks, typically the output of :meth:`PeakFinder.find_peaks`. Order
        is preserved.
    x_data : sequence, optional
        Sample positions. When given, ``positions`` holds
        ``x_data[middle_position]``; otherwise it equals
        ``middle_positions``.

    Returns
    -------
    dict
        Keys: ``middle_positions``, ``positions``, ``left_edges``,
        ``right_edges``, ``plateau_sizes``, ``left_diffs``, ``right_diffs``,
        ``heights`` and ``prominences``. ``heights`` / ``prominences`` are
        ``None`` unless every peak carries the property.

    Examples
    --------
    >>> table = peak_table([Peak(range(2, 5), 1, 3, height=3)])
    >>> table["middle_positions"].tolist(), table["heights"].tolist()
    ([3], [3])
    """
    middles = np.array([p.middle_position() for p in peaks], dtype=int)
    if x_data is None:
        positions = middles.copy()
    else:
        positions = np.asarray([x_data[i] for i in middles])

    heights = [p.height for p in peaks]
    prominences = [p.prominence for p in peaks]

    return {
        "middle_positions": middles,
        "positions": positions,
        "left_edges": np.array([p.start for p in peaks], dtype=int),
        "right_edges": np.array([p.end - 1 for p in peaks], dtype=int),
        "plateau_sizes": np.array([p.plateau_size for p in peaks], dtype=int),
        "left_diffs": np.asarray([p.left_diff for p in peaks]),
        "right_diffs": np.asarray([p.right_diff for p in peaks]),
        "heights": None if any(h is None for h in heights) else np.asarray(heights),
        "prominences": (
            None if any(v is None for v in prominences) else np.asarray(prominences)
        ),
    }


def find_nearest_peak(
    target: Any,
    peaks: Sequence[Peak],
    x_data: Sequence[Any] | None = None,
) -> Peak | None:
    """Return the peak whose position is closest to *target*.

    Parameters
    ----------
    target : object
        Position to match, in the units of *x_data* (indices when omitted).
    peaks : sequence of Peak
        Candidate peaks.
    x_data : sequence, optional
        Sample positions; a peak's position is ``x_data[middle_position]``.

    Returns
    -------
    Peak or None
        The closest peak (the first one listed on ties), or ``None`` if
        *peaks* is empty.

    Examples
    --------
    >>> peaks = [Peak(range(4, 5), 5, 5), Peak(range(2, 3), 1, 3)]
    >>> find_nearest_peak(2.2, peaks).start
    2
    """
    if len(peaks) == 0:
        return None

    def distance(peak: Peak) -> Any:
        middle = peak.middle_position()
        x = middle if x_data is None else x_data[middle]
        return x - target if x > target else target - x

    return min(peaks, key=distance)
