"""Core peak-filtering pipeline.

The pipeline stages:

1. Extract local maxima, merging flat runs into plateaus.
2. Filter on plateau size.
3. Filter on height (records the height).
4. Filter on prominence (records the prominence).
5. Rank by height and suppress peaks closer than the distance bound.

Stages 1-4 are chained generators; only stage 5 materializes a list.
"""

from __future__ import annotations

import inspect
import warnings
from collections.abc import Iterator, Sequence
from typing import Any

import numpy as np

from peakfinder._config import FinderConfig, check_bound
from peakfinder._limits import Limits
from peakfinder._peak import Peak


class PeakFinder:
    """Find peaks in a sequence of samples subject to configurable bounds.

    The sample type only needs subtraction and ordering, so ``int``,
    ``float``, :class:`fractions.Fraction`, :class:`decimal.Decimal` and numpy
    scalars all work. The "zero" used for default bounds and baselines is
    derived as ``y_data[0] - y_data[0]``.

    Parameters
    ----------
    y_data : sequence
        Sample values. Never modified.
    x_data : sequence, optional
        Positions of the samples, used only by the distance filter. Must
        have the same length as *y_data*. Defaults to the sample indices.

    Raises
    ------
    ValueError
        If *x_data* and *y_data* differ in length, or if *y_data* is a numpy
        array of unsigned integers (differences would wrap around).

    Examples
    --------
    >>> y = [1.0, 2.0, 3.0, 0.0, 5.0, 0.0]
    >>> peaks = PeakFinder(y).with_min_height(0.0).with_min_prominence(1.0).find_peaks()
    >>> [p.middle_position() for p in peaks]
    [4, 2]
    """

    def __init__(self, y_data: Sequence[Any], x_data: Sequence[Any] | None = None) -> None:
        if x_data is None:
            x_data = range(len(y_data))
        elif len(x_data) != len(y_data):
            msg = (
                f"x_data length ({len(x_data)}) must match "
                f"y_data length ({len(y_data)})"
            )
            raise ValueError(msg)

        _check_sample_dtype(y_data)

        self._y_data = y_data
        self._x_data = x_data
        self._zero = y_data[0] - y_data[0] if len(y_data) > 0 else None
        self._config = self._resolve(FinderConfig())

    @classmethod
    def with_x(cls, y_data: Sequence[Any], x_data: Sequence[Any]) -> PeakFinder:
        """Construct a finder with an explicit position sequence."""
        return cls(y_data, x_data)

    @property
    def y_data(self) -> Sequence[Any]:
        return self._y_data

    @property
    def x_data(self) -> Sequence[Any]:
        return self._x_data

    @property
    def config(self) -> FinderConfig:
        """The active, fully resolved :class:`FinderConfig`."""
        return self._config

    def with_config(self, config: FinderConfig | dict[str, Any] | None) -> PeakFinder:
        """Replace all bounds at once.

        Parameters
        ----------
        config : FinderConfig, dict or None
            A config instance, or a case-info dict passed to
            :meth:`FinderConfig.from_case_info`.
        """
        if not isinstance(config, FinderConfig):
            config = FinderConfig.from_case_info(config)
        self._config = self._resolve(config)
        return self

    # ------------------------------------------------------------------
    # Builder methods
    # ------------------------------------------------------------------

    def with_min_height(self, height: Any) -> PeakFinder:
        return self._set("height", lower=height)

    def with_max_height(self, height: Any) -> PeakFinder:
        return self._set("height", upper=height)

    def with_min_prominence(self, prominence: Any) -> PeakFinder:
        return self._set("prominence", lower=prominence)

    def with_max_prominence(self, prominence: Any) -> PeakFinder:
        return self._set("prominence", upper=prominence)

    def with_min_difference(self, difference: Any) -> PeakFinder:
        return self._set("difference", lower=difference)

    def with_max_difference(self, difference: Any) -> PeakFinder:
        return self._set("difference", upper=difference)

    def with_min_plateau_size(self, size: int) -> PeakFinder:
        return self._set("plateau_size", lower=size)

    def with_max_plateau_size(self, size: int) -> PeakFinder:
        return self._set("plateau_size", upper=size)

    def with_min_distance(self, distance: Any) -> PeakFinder:
        return self._set("distance", lower=distance)

    def with_max_distance(self, distance: Any) -> PeakFinder:
        return self._set("distance", upper=distance)

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    def find_peaks(self) -> list[Peak]:
        """Return the peaks matching every configured bound.

        Properties whose bound was never configured (``height``,
        ``prominence``) are left as ``None``; their computation is skipped.

        Returns
        -------
        list of Peak
            Peaks sorted by height, highest first. Peaks of equal height keep
            ascending position order.
        """
        if len(self._y_data) < 2:
            return []

        peaks = self._filter_prominence(
            self._filter_height(self._filter_plateau(self._local_maxima()))
        )
        return self._filter_distance(list(peaks))

    def _local_maxima(self) -> Iterator[Peak]:
        """Yield one candidate per plateau whose flanks satisfy the difference range."""
        zero = self._zero
        limit = self._config.difference
        data = self._y_data

        back_diff = data[1] - data[0]
        prev = data[1]
        start: int | None = None

        for i in range(2, len(data)):
            y = data[i]
            ahead_diff = prev - y  # positive on a falling step
            back_inside = limit.is_inside(back_diff)

            if back_inside and ahead_diff == zero:
                if start is None:
                    start = i - 1
            else:
                if back_inside and limit.is_inside(ahead_diff):
                    yield Peak(
                        range(i - 1 if start is None else start, i),
                        back_diff,
                        ahead_diff,
                    )
                start = None
                back_diff = zero - ahead_diff
            prev = y

    def _filter_plateau(self, peaks: Iterator[Peak]) -> Iterator[Peak]:
        limit = self._config.plateau_size
        if limit.is_empty():
            yield from peaks
            return
        for peak in peaks:
            if limit.is_inside(peak.plateau_size):
                yield peak

    def _filter_height(self, peaks: Iterator[Peak]) -> Iterator[Peak]:
        limit = self._config.height
        if limit.is_empty():
            yield from peaks
            return
        for peak in peaks:
            height = self._y_data[peak.start]
            if limit.is_inside(height):
                yield peak.with_height(height)

    def _filter_prominence(self, peaks: Iterator[Peak]) -> Iterator[Peak]:
        limit = self._config.prominence
        if limit.is_empty():
            yield from peaks
            return
        for peak in peaks:
            prominence = self._prominence(peak)
            if limit.is_inside(prominence):
                yield peak.with_prominence(prominence)

    def _filter_distance(self, peaks: list[Peak]) -> list[Peak]:
        """Rank *peaks* by height and greedily drop those too close to the last kept one."""
        data = self._y_data
        # sorted() is stable, also with reverse=True: equal heights keep index order
        peaks = sorted(peaks, key=lambda p: data[p.start], reverse=True)

        limit = self._config.distance
        if limit.is_empty() or not peaks:
            return peaks

        x_data = self._x_data
        kept = [peaks[0]]
        x_prev = x_data[peaks[0].middle_position()]
        for peak in peaks[1:]:
            x = x_data[peak.middle_position()]
            dist = x - x_prev if x > x_prev else x_prev - x
            if limit.is_inside(dist):
                kept.append(peak)
                x_prev = x
        return kept

    def _prominence(self, peak: Peak) -> Any:
        """Height of *peak* above the higher of its two valley floors.

        Each valley floor is the minimum of the samples walking outward from
        the plateau until a sample higher than the peak (exclusive) or the
        data edge. A side with no such samples has no valley.
        """
        data = self._y_data
        peak_height = data[peak.start]

        left = _valley_floor(data, range(peak.start - 1, -1, -1), peak_height)
        right = _valley_floor(data, range(peak.end, len(data)), peak_height)

        if left is None and right is None:
            return self._zero
        if left is None:
            return peak_height - right
        if right is None:
            return peak_height - left
        return peak_height - (left if left >= right else right)

    def _set(self, name: str, *, lower: Any = None, upper: Any = None) -> PeakFinder:
        # only the supplied value is validated; the derived default may be NaN
        check_bound(name, lower)
        check_bound(name, upper)
        limits = getattr(self._config, name)
        if lower is not None:
            limits = limits.replace_lower(lower)
        if upper is not None:
            limits = limits.replace_upper(upper)
        self._config = self._config._evolve(name, limits)
        return self

    def _resolve(self, config: FinderConfig) -> FinderConfig:
        """Fill in the data-derived default difference range."""
        if config.difference is not None:
            return config
        return config._evolve("difference", Limits(lower=self._zero))


def find_peaks(
    y_data: Sequence[Any],
    x_data: Sequence[Any] | None = None,
    *,
    config: FinderConfig | dict[str, Any] | None = None,
) -> list[Peak]:
    """Find peaks in *y_data* in a single call.

    Parameters
    ----------
    y_data : sequence
        Sample values.
    x_data : sequence, optional
        Sample positions for the distance filter (defaults to indices).
    config : FinderConfig or dict, optional
        Bounds, either as a config or a dict accepted by
        :meth:`FinderConfig.from_case_info`.

    Returns
    -------
    list of Peak
        Same as :meth:`PeakFinder.find_peaks`.

    Examples
    --------
    >>> peaks = find_peaks([1, 2, 3, 0, 5, 0], config={"height": 0})
    >>> [(p.start, p.height) for p in peaks]
    [(4, 5), (2, 3)]
    """
    return PeakFinder(y_data, x_data).with_config(config).find_peaks()


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------


def _valley_floor(data: Sequence[Any], indices: range, peak_height: Any) -> Any | None:
    """Return the lowest sample met while walking away from a peak.

    Parameters
    ----------
    data : sequence
        Sample values.
    indices : range
        Walk order, starting next to the plateau and moving outward.
    peak_height : object
        Plateau value. The walk stops before the first sample that is not
        ``<= peak_height`` (a higher sample, or NaN).

    Returns
    -------
    object or None
        Minimum of the visited samples, or ``None`` if the first sample
        already stops the walk or *indices* is empty.
    """
    floor = None
    for i in indices:
        value = data[i]
        if not value <= peak_height:
            break
        if floor is None or value < floor:
            floor = value
    return floor


def _check_sample_dtype(y_data: Sequence[Any]) -> None:
    """Reject unsigned numpy samples and warn about NaN samples.

    Only objects exposing a numpy ``dtype`` are inspected; plain Python
    sequences pass through unchecked.

    Parameters
    ----------
    y_data : sequence
        Sample values handed to :class:`PeakFinder`.

    Raises
    ------
    ValueError
        If *y_data* has an unsigned integer dtype.

    Warns
    -----
    RuntimeWarning
        If *y_data* has a floating dtype and contains NaN. The warning is
        attributed to the first caller outside ``peakfinder``.
    """
    dtype = getattr(y_data, "dtype", None)
    if dtype is None:
        return
    if np.issubdtype(dtype, np.unsignedinteger):
        msg = (
            f"unsigned sample dtype {dtype} is not supported; "
            "cast to a signed or floating dtype first"
        )
        raise ValueError(msg)
    if np.issubdtype(dtype, np.floating) and np.isnan(np.asarray(y_data)).any():
        warnings.warn(
            "y_data contains NaN; comparisons against NaN always fail, "
            "so peaks next to NaN samples are unreliable",
            RuntimeWarning,
            stacklevel=_caller_stacklevel(),
        )


def _caller_stacklevel() -> int:
    """Return the ``warnings.warn`` stacklevel of the first frame outside ``peakfinder``.

    Counted relative to the function that calls this helper, so that the
    warning points at user code whether the finder was built directly,
    through :meth:`PeakFinder.with_x` or through :func:`find_peaks`.
    """
    frame = inspect.currentframe()
    # skip this helper; level 1 is the function issuing the warning
    frame = frame.f_back if frame is not None else None
    level = 1
    while frame is not None and frame.f_globals.get("__name__", "").startswith("peakfinder"):
        frame = frame.f_back
        level += 1
    return level
