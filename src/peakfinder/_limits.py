"""Inclusive bounded ranges used as acceptance tests by the peak filters.

A :class:`Limits` with neither bound set is *empty*: the finder skips the
corresponding filter stage entirely instead of merely accepting everything.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import Any

import numpy as np


@dataclass(frozen=True)
class Limits:
    """Optional-lower / optional-upper inclusive range over an ordered type.

    Parameters
    ----------
    lower : object or None
        Inclusive lower bound, or ``None`` for no lower restriction.
    upper : object or None
        Inclusive upper bound, or ``None`` for no upper restriction.

    Examples
    --------
    >>> Limits(lower=0).is_inside(3)
    True
    >>> Limits(lower=0, upper=2).is_inside(3)
    False
    >>> Limits().is_empty()
    True
    """

    lower: Any | None = None
    upper: Any | None = None

    @classmethod
    def empty(cls) -> Limits:
        """Return the unrestricted range."""
        return cls()

    @classmethod
    def from_bound(cls, bound: Any | None) -> Limits:
        """Build a range from a scipy-style bound specification.

        Parameters
        ----------
        bound : None, scalar, 2-sequence or 1-D array of length 2
            ``None`` gives the empty range, a scalar sets only the lower
            bound, and ``(lower, upper)`` sets both (either may be ``None``).

        Returns
        -------
        Limits
            The corresponding range.

        Raises
        ------
        ValueError
            If *bound* is a sequence or array that is not a pair.
        """
        if bound is None:
            return cls()
        if isinstance(bound, Limits):
            return bound
        if isinstance(bound, str):
            return cls(lower=bound)
        if isinstance(bound, Sequence):
            is_pair = len(bound) == 2
        elif np.ndim(bound) > 0:
            is_pair = np.ndim(bound) == 1 and len(bound) == 2
        else:
            return cls(lower=bound)
        if not is_pair:
            msg = f"bound must be a scalar or a (lower, upper) pair, got {bound!r}"
            raise ValueError(msg)
        return cls(lower=bound[0], upper=bound[1])

    def is_empty(self) -> bool:
        return self.lower is None and self.upper is None

    def is_inside(self, value: Any) -> bool:
        """Return ``True`` if *value* satisfies both configured bounds."""
        return (self.lower is None or value >= self.lower) and (
            self.upper is None or value <= self.upper
        )

    def replace_lower(self, value: Any | None) -> Limits:
        return replace(self, lower=value)

    def replace_upper(self, value: Any | None) -> Limits:
        return replace(self, upper=value)
