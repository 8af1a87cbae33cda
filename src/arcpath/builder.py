from __future__ import annotations

from bisect import bisect_right
from typing import List, Sequence

import numpy as np

from arcpath.path import Path
from arcpath.validation import ValidationError, require_param, require_point


class PathBuilder:
    """Collects points for a :class:`~arcpath.path.Path`.

    Points are either appended in call order with :meth:`add_point`, or placed by
    an explicit parameter with :meth:`add_sorted_point`. A builder sticks to the
    mode of its first call; mixing the two raises :class:`ValidationError`.
    Calling :meth:`finalize` consumes the builder.
    """

    def __init__(self) -> None:
        self._points: List[np.ndarray] = []
        self._sorted: List[np.ndarray] = []
        self._params: List[float] = []
        self._finalized = False

    def __len__(self) -> int:
        return len(self._sorted) if self._params else len(self._points)

    @property
    def points(self) -> np.ndarray:
        """Points accumulated so far, in the order the path will use."""

        pending = self._sorted if self._params else self._points
        if not pending:
            return np.zeros((0, 4), dtype=np.float32)
        arr = np.vstack(pending)
        arr.setflags(write=False)
        return arr

    @property
    def params(self) -> tuple[float, ...]:
        return tuple(self._params)

    def add_point(self, point: Sequence[float]) -> "PathBuilder":
        """Append ``point`` after every point added so far."""

        self._check_open()
        if self._params:
            raise ValidationError("add_point cannot be mixed with add_sorted_point on one builder.")
        self._points.append(require_point(point))
        return self

    def add_sorted_point(self, point: Sequence[float], param: float) -> "PathBuilder":
        """Insert ``point`` ordered ascending by ``param``.

        A point whose ``param`` equals existing ones goes after them, so equal
        parameters keep their insertion order.
        """

        self._check_open()
        if self._points:
            raise ValidationError("add_sorted_point cannot be mixed with add_point on one builder.")
        arr = require_point(point)
        value = require_param(param)
        idx = bisect_right(self._params, value)
        self._sorted.insert(idx, arr)
        self._params.insert(idx, value)
        return self

    def finalize(self) -> Path:
        """Consume the builder and return the finished path."""

        self._check_open()
        self._finalized = True
        chosen = self._sorted if self._params else self._points
        pts = np.vstack(chosen) if chosen else np.zeros((0, 4), dtype=np.float32)
        self._points, self._sorted, self._params = [], [], []
        return Path(points=pts)

    def _check_open(self) -> None:
        if self._finalized:
            raise ValidationError("PathBuilder has already been finalized.")


__all__ = ["PathBuilder"]
