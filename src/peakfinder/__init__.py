"""Plateau-aware local-maximum peak finder.

The finder extracts local maxima from a one-dimensional sequence of samples,
merging flat runs into plateaus, then filters them on plateau size, height,
prominence and the distance between accepted peaks. Peaks are returned
ranked by height, highest first.

Public API
----------
.. autosummary::
    PeakFinder
    Peak
    Limits
    FinderConfig
    find_peaks
    sort_by_position
    peak_table
    find_nearest_peak
    PARAM_ALIASES
"""

from peakfinder._config import PARAM_ALIASES, FinderConfig
from peakfinder._finder import PeakFinder, find_peaks
from peakfinder._limits import Limits
from peakfinder._peak import Peak
from peakfinder._selection import find_nearest_peak, peak_table, sort_by_position

__version__ = "0.1.0"
__all__ = [
    "PARAM_ALIASES",
    "FinderConfig",
    "Limits",
    "Peak",
    "PeakFinder",
    "find_nearest_peak",
    "find_peaks",
    "peak_table",
    "sort_by_position",
]
