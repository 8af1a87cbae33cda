from __future__ import annotations

import numbers
from typing import Sequence

import numpy as np


class ValidationError(ValueError):
    """Raised when validation constraints are violated."""


def require_point(value: Sequence[float], label: str = "point") -> np.ndarray:
    """Coerce ``value`` to a homogeneous float32 point ``(x, y, z, w)``.

    Three-component input is promoted with ``w = 1``.
    """

    try:
        arr = np.asarray(value, dtype=float).reshape(-1)
    except Exception as exc:
        raise ValidationError(f"{label} must be a 3D or homogeneous 4D coordinate.") from exc
    if arr.shape[0] == 3:
        arr = np.append(arr, 1.0)
    if arr.shape[0] != 4:
        raise ValidationError(f"{label} must be a 3D or homogeneous 4D coordinate.")
    if not np.all(np.isfinite(arr)):
        raise ValidationError(f"{label} must be finite.")
    return arr.astype(np.float32)


def require_param(value: float) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError("param must be a real number.")
    value = float(value)
    if not np.isfinite(value):
        raise ValidationError("param must be finite.")
    return value


def require_sample_count(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError("numpts must be an integer.")
    if value < 2:
        raise ValidationError("numpts must be >= 2.")
    return int(value)


__all__ = ["ValidationError", "require_point", "require_param", "require_sample_count"]
