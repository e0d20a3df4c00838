"""Peak record returned by :class:`peakfinder.PeakFinder`."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True)
class Peak:
    """A detected local maximum spanning one plateau.

    Parameters
    ----------
    position : range
        Half-open index range ``[start, end)`` of the plateau. All samples in
        the range share the same value.
    left_diff : object
        Step from the nearest differing neighbour on the left up to the
        plateau (``plateau - left``); non-negative for a rising flank.
    right_diff : object
        Step from the plateau down to the nearest differing neighbour on the
        right (``plateau - right``); non-negative for a falling flank.
    height : object or None
        Plateau value. Only set when a height bound was configured.
    prominence : object or None
        Peak prominence. Only set when a prominence bound was configured.
    """

    position: range
    left_diff: Any
    right_diff: Any
    height: Any | None = None
    prominence: Any | None = None

    def __post_init__(self) -> None:
        if self.position.step != 1 or self.position.start >= self.position.stop:
            msg = f"position must be a non-empty unit-step range, got {self.position!r}"
            raise ValueError(msg)

    @property
    def start(self) -> int:
        return self.position.start

    @property
    def end(self) -> int:
        return self.position.stop

    @property
    def plateau_size(self) -> int:
        """Number of samples in the plateau."""
        return len(self.position)

    def middle_position(self) -> int:
        """Return the middle index of the plateau, rounding down for even sizes.

        Examples
        --------
        >>> Peak(range(2, 5), 1, 3).middle_position()
        3
        >>> Peak(range(6, 8), 5, 5).middle_position()
        7
        """
        return (self.position.start + self.position.stop) // 2

    def with_height(self, height: Any) -> Peak:
        return replace(self, height=height)

    def with_prominence(self, prominence: Any) -> Peak:
        return replace(self, prominence=prominence)
