"""arcpath – even arc-length resampling of polylines."""

from __future__ import annotations

from .builder import PathBuilder
from .path import Path
from .validation import ValidationError

__all__ = ["Path", "PathBuilder", "ValidationError", "__version__"]

__version__ = "0.1.0"
