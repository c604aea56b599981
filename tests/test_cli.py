"""Tests for the command line interface."""

import stat

import pytest
from click.testing import CliRunner

from humaniser.cli.main import cli


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setenv("HUMANISER_CONFIG", str(tmp_path / "config.yaml"))
    return CliRunner()


def invoke(runner, *args):
    return runner.invoke(cli, list(args))


def test_number(runner):
    result = invoke(runner, "number", "1200")
    assert result.exit_code == 0
    assert result.output.strip() == "1.2K"


def test_number_full_and_grouped(runner):
    assert invoke(runner, "number", "2500000000", "--full").output.strip() == "2.5 billion"
    assert invoke(runner, "number", "1234567", "--grouped").output.strip() == "1,234,567"


def test_both_renders_table(runner):
    result = invoke(runner, "number", "1200", "--both")
    assert result.exit_code == 0
    assert "1.2K" in result.output
    assert "1.2 thousand" in result.output


def test_size(runner):
    assert invoke(runner, "size", "5242880").output.strip() == "5 MiB"
    assert invoke(runner, "size", "5000000", "--decimal").output.strip() == "5 MB"


def test_size_negative_fails(runner):
    result = invoke(runner, "size", "--", "-1")
    assert result.exit_code == 1
    assert "InvalidInputError" in result.output


def test_time(runner):
    assert invoke(runner, "time", "3661").output.strip() == "1h 1m 1s"
    assert invoke(runner, "time", "3661", "--full").output.strip() == "1 hour 1 minute 1 second"


def test_ago(runner):
    result = invoke(runner, "ago", "1000", "--now", "1075")
    assert result.output.strip() == "1m"
    result = invoke(runner, "ago", "2024-01-01T00:00:00", "--now", "2024-01-02T12:00:00", "--full")
    assert result.output.strip() == "yesterday"


def test_ago_without_reference(runner):
    assert invoke(runner, "ago", "--full").output.strip() == "never"


def test_ago_bad_reference(runner):
    result = invoke(runner, "ago", "soon")
    assert result.exit_code == 2


def test_percent(runner):
    assert invoke(runner, "percent", "12.3456", "-p", "1").output.strip() == "12.3%"
    assert invoke(runner, "percent", "0.25", "--ratio", "-p", "0").output.strip() == "25%"


def test_percent_default_precision(runner):
    assert invoke(runner, "percent", "12.3456").output.strip() == "12.3%"


def test_perms(runner):
    assert invoke(runner, "perms", "40755", "--unix").output.strip() == "drwxr-xr-x"
    result = invoke(runner, "perms", "100640", "--descriptive")
    assert result.output.strip() == "User: Read, Write; Group: Read; Other: None"


def test_perms_from_path(runner, tmp_path):
    target = tmp_path / "file.txt"
    target.write_text("data")
    target.chmod(0o640)
    result = invoke(runner, "perms", "--path", str(target), "--unix")
    assert result.output.strip() == "-rw-r-----"


def test_perms_requires_mode_or_path(runner):
    assert invoke(runner, "perms").exit_code == 2


def test_config_defaults_apply(runner, tmp_path):
    (tmp_path / "config.yaml").write_text("style: full\nsize_system: decimal\n")
    assert invoke(runner, "size", "5000000").output.strip() == "5 megabytes"
    assert invoke(runner, "size", "5000000", "--concise").output.strip() == "5 MB"


def test_invalid_config_reported(runner, tmp_path):
    (tmp_path / "config.yaml").write_text("style: loud\n")
    result = invoke(runner, "number", "1200")
    assert result.exit_code == 1
    assert "ValidationError" in result.output


def test_config_init_and_show(runner, tmp_path):
    result = invoke(runner, "config", "init")
    assert result.exit_code == 0
    assert (tmp_path / "config.yaml").exists()

    assert invoke(runner, "config", "init").exit_code == 1
    assert invoke(runner, "config", "init", "--force").exit_code == 0

    result = invoke(runner, "config", "show")
    assert result.exit_code == 0
    assert "size_system" in result.output
    assert "binary" in result.output


def test_explicit_config_option(runner, tmp_path):
    path = tmp_path / "other.yaml"
    path.write_text("style: full\n")
    result = runner.invoke(cli, ["--config", str(path), "time", "61"])
    assert result.output.strip() == "0 hours 1 minute 1 second"


def test_version(runner):
    result = invoke(runner, "--version")
    assert result.exit_code == 0
    assert "humaniser" in result.output
