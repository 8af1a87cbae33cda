from __future__ import annotations

from pathlib import Path

import pytest

from arcpath import PathBuilder
from arcpath import _config


def staircase_points(count: int = 10) -> list[tuple[float, float, float, float]]:
    """Diagonal points (i, i, 0, 1) for i in range(count)."""
    return [(float(i), float(i), 0.0, 1.0) for i in range(count)]


@pytest.fixture
def staircase_path():
    builder = PathBuilder()
    for point in staircase_points():
        builder.add_point(point)
    return builder.finalize()


@pytest.fixture
def segment_path():
    return PathBuilder().add_point((0, 0, 0, 1)).add_point((10, 0, 0, 1)).finalize()


@pytest.fixture
def user_config(tmp_path, monkeypatch) -> Path:
    config_dir = tmp_path / ".arcpath"
    monkeypatch.setattr(_config, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(_config, "CONFIG_FILE", config_dir / "arcpath.cfg")
    return config_dir / "arcpath.cfg"
