"""Sorted-insertion example: points arrive out of order with a time stamp."""

from __future__ import annotations

from arcpath import PathBuilder

SAMPLES = [
    (2.0, (4.0, 0.0, 0.0)),
    (0.0, (0.0, 0.0, 0.0)),
    (3.0, (4.0, 3.0, 0.0)),
    (1.0, (2.0, 0.0, 0.0)),
]


def build():
    builder = PathBuilder()
    for stamp, point in SAMPLES:
        builder.add_sorted_point(point, stamp)
    return builder.finalize()


if __name__ == "__main__":
    path = build()
    print(f"{path!r}: {path.evaluate(8)}")
