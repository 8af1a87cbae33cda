from __future__ import annotations

import json

from typer.testing import CliRunner

from arcpath.cli import app

runner = CliRunner()


def test_demo_prints_staircase_length(user_config):
    result = runner.invoke(app, ["demo"])
    assert result.exit_code == 0, result.output
    assert "path.length() = 12.7279" in result.output
    assert "5 samples" in result.output
    assert "15 samples" in result.output


def test_demo_custom_samples(user_config):
    result = runner.invoke(app, ["demo", "--count", "3", "--samples", "3"])
    assert result.exit_code == 0, result.output
    assert "3 samples" in result.output
    assert "15 samples" not in result.output


def test_resample_uses_config_default(user_config):
    user_config.parent.mkdir(parents=True)
    user_config.write_text(json.dumps({"default_samples": 3, "precision": 1}))
    result = runner.invoke(app, ["resample", "-p", "0,0,0", "-p", "10,0,0"])
    assert result.exit_code == 0, result.output
    assert "2 points in given order" in result.output
    assert "3 samples" in result.output
    assert "5.0" in result.output


def test_resample_with_params(user_config):
    result = runner.invoke(
        app,
        ["resample", "-p", "10,0,0", "--param", "2", "-p", "0,0,0", "--param", "1", "-n", "5"],
    )
    assert result.exit_code == 0, result.output
    assert "parameter order" in result.output
    assert "2.5000" in result.output


def test_resample_param_count_mismatch(user_config):
    result = runner.invoke(app, ["resample", "-p", "0,0,0", "-p", "1,0,0", "--param", "1"])
    assert result.exit_code != 0


def test_resample_rejects_bad_point(user_config):
    result = runner.invoke(app, ["resample", "-p", "0,0", "-p", "1,0,0"])
    assert result.exit_code != 0


def test_resample_rejects_single_sample(user_config):
    result = runner.invoke(app, ["resample", "-p", "0,0,0", "-p", "1,0,0", "-n", "1"])
    assert result.exit_code != 0
