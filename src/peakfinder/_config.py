"""Filter configuration for the peak finder.

This module defines :class:`FinderConfig`, a frozen dataclass that holds the
five acceptance ranges applied by the peak-filtering pipeline.
"""

from __future__ import annotations

import copy
from dataclasses import asdict, dataclass, field, fields
from typing import Any

from peakfinder._limits import Limits

#: Mapping of accepted case-info keys to canonical field names.
#: ``threshold`` follows the keyword used by ``scipy.signal.find_peaks``.
PARAM_ALIASES: dict[str, str] = {
    "height": "height",
    "prominence": "prominence",
    "difference": "difference",
    "threshold": "difference",
    "plateau_size": "plateau_size",
    "distance": "distance",
}

_NON_NEGATIVE = ("prominence", "difference", "distance")


def check_bound(name: str, value: Any) -> None:
    """Validate one side of the range called *name*.

    Parameters
    ----------
    name : str
        Canonical field name of the range (see :data:`PARAM_ALIASES`).
    value : object or None
        Bound to check. ``None`` (no bound) is always valid.

    Raises
    ------
    ValueError
        If a prominence, difference or distance bound is below its own zero
        (``v - v``), or a plateau size is not a non-negative integer.
    """
    if value is None:
        return
    if name in _NON_NEGATIVE:
        zero = value - value
        if not zero <= value:
            msg = f"{name} must be >= 0, got {value!r}"
            raise ValueError(msg)
    elif name == "plateau_size":
        if isinstance(value, bool) or int(value) != value or value < 0:
            msg = f"plateau_size must be a non-negative integer, got {value!r}"
            raise ValueError(msg)


@dataclass(frozen=True)
class FinderConfig:
    """Acceptance ranges for the peak-filtering pipeline.

    Every range is optional. An empty range means the associated property is
    neither computed nor filtered on, with one exception: ``difference=None``
    requests the default range ``[zero, +inf)`` derived from the samples
    (both flanks of a peak must be non-decreasing into and non-increasing out
    of the plateau).

    Parameters
    ----------
    height : Limits
        Bounds on the plateau value.
    prominence : Limits
        Bounds on the peak prominence (non-negative).
    difference : Limits or None
        Bounds on both flank steps (non-negative). ``None`` selects the
        data-derived default.
    plateau_size : Limits
        Bounds on the number of samples in the plateau.
    distance : Limits
        Bounds on the positional distance to the previously kept peak
        (non-negative).

    Examples
    --------
    >>> cfg = FinderConfig(height=Limits(lower=0.0))
    >>> cfg.height.is_inside(3.0)
    True

    >>> cfg = FinderConfig.from_case_info({"prominence": 1.0, "max_distance": 5})
    >>> cfg.distance.upper
    5
    """

    height: Limits = field(default_factory=Limits)
    """Bounds on the plateau value."""

    prominence: Limits = field(default_factory=Limits)
    """Bounds on the peak prominence."""

    difference: Limits | None = None
    """Bounds on the flank steps (``None`` selects the data-derived default)."""

    plateau_size: Limits = field(default_factory=Limits)
    """Bounds on the plateau width in samples."""

    distance: Limits = field(default_factory=Limits)
    """Bounds on the distance to the previously kept peak."""

    def __post_init__(self) -> None:
        """Validate parameter constraints after initialization.

        Raises
        ------
        ValueError
            If a non-negative bound is negative or a plateau size is not a
            non-negative integer.
        """
        for f in fields(self):
            limits = getattr(self, f.name)
            if limits is None:
                continue
            check_bound(f.name, limits.lower)
            check_bound(f.name, limits.upper)

    @classmethod
    def from_case_info(cls, case_info: Any | None) -> FinderConfig:
        """Construct a :class:`FinderConfig` from a dict with alias support.

        Parameters
        ----------
        case_info : dict or None
            Bound specifications keyed by name (see :data:`PARAM_ALIASES`).
            A value may be a scalar (lower bound), a ``(lower, upper)`` pair
            or a :class:`Limits`. ``min_<name>`` and ``max_<name>`` keys set
            a single side and take precedence over the combined key.
            Aliases of the same range (``threshold`` and ``difference``)
            may not both be given.

        Returns
        -------
        FinderConfig
            Validated configuration instance.

        Raises
        ------
        ValueError
            If two aliases of the same range are given, or a bound is
            invalid.

        Examples
        --------
        >>> cfg = FinderConfig.from_case_info({"height": (0, 10), "threshold": 1})
        >>> (cfg.height.lower, cfg.height.upper, cfg.difference.lower)
        (0, 10, 1)
        """
        if not isinstance(case_info, dict) or not case_info:
            return cls()

        data: dict[str, Limits] = {}
        given: dict[str, str] = {}
        for key, name in PARAM_ALIASES.items():
            if case_info.get(key) is None:
                continue
            if name in given:
                msg = f"{given[name]!r} and {key!r} both set the {name} range"
                raise ValueError(msg)
            given[name] = key
            data[name] = Limits.from_bound(case_info[key])

        for name in set(PARAM_ALIASES.values()):
            lower = case_info.get(f"min_{name}")
            upper = case_info.get(f"max_{name}")
            if lower is None and upper is None:
                continue
            limits = data.get(name, Limits())
            if lower is not None:
                limits = limits.replace_lower(lower)
            if upper is not None:
                limits = limits.replace_upper(upper)
            data[name] = limits

        return cls(**data)

    def to_metadata(self) -> dict[str, Any]:
        """Serialize all ranges to a plain dictionary.

        Returns
        -------
        dict
            ``{name: {"lower": ..., "upper": ...}}``; ``difference`` maps to
            ``None`` while the data-derived default is in effect.
        """
        return asdict(self)

    def _evolve(self, name: str, limits: Limits) -> FinderConfig:
        """Return a copy with the range *name* replaced, skipping validation.

        Callers validate user-supplied values with :func:`check_bound` first.
        The data-derived default difference range is installed this way, since
        a zero derived from a non-finite sample (``inf - inf``) is NaN.
        """
        config = copy.copy(self)
        object.__setattr__(config, name, limits)
        return config
