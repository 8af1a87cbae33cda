from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Iterable, Sequence

import numpy as np

from arcpath.validation import ValidationError, require_point, require_sample_count


def _as_point_array(points: Iterable[Sequence[float]]) -> np.ndarray:
    pts = [require_point(p) for p in points]
    if not pts:
        return np.zeros((0, 4), dtype=np.float32)
    return np.vstack(pts)


@dataclass(frozen=True, eq=False, repr=False)
class Path:
    """Polyline of homogeneous points that can be resampled evenly by arc length.

    Paths are normally produced by :meth:`arcpath.builder.PathBuilder.finalize`.
    The point sequence is fixed once constructed; the cumulative length table is
    computed on first use and cached for the lifetime of the instance.
    """

    points: np.ndarray
    _lvalues: np.ndarray | None = field(default=None, init=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False)

    def __post_init__(self) -> None:
        pts = self.points
        if not (isinstance(pts, np.ndarray) and pts.dtype == np.float32 and pts.ndim == 2 and pts.shape[1] == 4):
            pts = _as_point_array(pts)
        elif not np.all(np.isfinite(pts)):
            raise ValidationError("points must be finite.")
        pts = np.array(pts, dtype=np.float32, copy=True)
        pts.setflags(write=False)
        object.__setattr__(self, "points", pts)

    @classmethod
    def from_points(cls, points: Iterable[Sequence[float]]) -> "Path":
        return cls(points=_as_point_array(points))

    def __len__(self) -> int:
        return int(self.points.shape[0])

    def __repr__(self) -> str:
        if self._lvalues is None:
            state = "length=pending"
        else:
            state = f"length={float(self._lvalues[-1]):.6g}"
        return f"Path(n_points={len(self)}, {state})"

    @property
    def cumulative_lengths(self) -> np.ndarray:
        """Arc length from the first point to each point, as float32."""

        return self._ensure_lengths().copy()

    def length(self) -> float:
        """Total length of the polyline, summed over all consecutive segments."""

        return float(self._ensure_lengths()[-1])

    def evaluate(self, numpts: int) -> np.ndarray:
        """Distribute ``numpts`` points evenly by arc length along the polyline.

        The first sample is the first point and the last sample lands on the
        final point, up to float32 rounding of the accumulated step. Samples
        falling on a zero-length segment take that segment's (shared) point.
        """

        numpts = require_sample_count(numpts)
        if len(self) < 2:
            raise ValidationError("evaluate requires a path with at least two points.")

        lvalues = self._ensure_lengths()
        pts = self.points
        last = lvalues.shape[0] - 1
        step = np.float32(lvalues[-1] / np.float32(numpts - 1))
        target = np.float32(0.0)
        idx = 0
        sampled = []
        for _ in range(numpts):
            while idx < last and lvalues[idx + 1] < target:
                idx += 1
            if idx == last:
                idx -= 1
            l0, l1 = lvalues[idx], lvalues[idx + 1]
            span = l1 - l0
            if span == 0:
                sampled.append(pts[idx])
            else:
                a = target - l0
                b = l1 - target
                sampled.append((pts[idx + 1] * a + pts[idx] * b) / span)
            target = np.float32(target + step)
        return np.asarray(sampled, dtype=np.float32)

    def _ensure_lengths(self) -> np.ndarray:
        lvalues = self._lvalues
        if lvalues is not None:
            return lvalues
        with self._lock:
            if self._lvalues is None:
                object.__setattr__(self, "_lvalues", _cumulative_lengths(self.points))
            return self._lvalues


def _cumulative_lengths(points: np.ndarray) -> np.ndarray:
    running = np.float32(0.0)
    lvalues = [running]
    for i in range(1, points.shape[0]):
        running = np.float32(running + np.linalg.norm(points[i] - points[i - 1]))
        lvalues.append(running)
    out = np.asarray(lvalues, dtype=np.float32)
    out.setflags(write=False)
    return out


__all__ = ["Path"]
