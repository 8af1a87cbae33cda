"""Resample the diagonal staircase path with 5 and 15 evenly spaced points."""

from __future__ import annotations

from arcpath import PathBuilder


def build():
    """Ten points (i, i, 0, 1), appended in order."""

    builder = PathBuilder()
    for i in range(10):
        builder.add_point((float(i), float(i), 0.0, 1.0))
    return builder.finalize()


if __name__ == "__main__":
    path = build()
    print(f"path.length() = {path.length()}")
    print(repr(path))
    print(path.evaluate(5))
    print(path.evaluate(15))
