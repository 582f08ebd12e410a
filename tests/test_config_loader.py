from __future__ import annotations

from pathlib import Path

import pytest

from jobtrack.config_loader import DEFAULT_DATA_FILE, Config, load_config
from jobtrack.errors import ConfigError


def write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_missing_default_config_gives_defaults(workdir):
    assert load_config(workdir / "jobtrack.yaml") == Config()
    assert Config().data_file == DEFAULT_DATA_FILE


def test_missing_required_config_raises(workdir):
    with pytest.raises(ConfigError, match="Config not found"):
        load_config(workdir / "custom.yaml", required=True)


def test_reads_yaml_values(workdir):
    path = write(workdir / "jobtrack.yaml", "data_file: data/jobs.json\nlog_file: data/jobtrack.log\ncolor: false\n")
    assert load_config(path) == Config(data_file="data/jobs.json", log_file="data/jobtrack.log", color=False)


def test_empty_yaml_gives_defaults(workdir):
    path = write(workdir / "jobtrack.yaml", "")
    assert load_config(path) == Config()


@pytest.mark.parametrize(
    "text, message",
    [
        ("data_file: [unclosed", "Invalid YAML"),
        ("- just\n- a list\n", "mapping"),
        ("data_file: ''\n", "data_file"),
        ("color: maybe\n", "color"),
        ("log_file: 3\n", "log_file"),
    ],
)
def test_invalid_config(workdir, text, message):
    path = write(workdir / "jobtrack.yaml", text)
    with pytest.raises(ConfigError, match=message):
        load_config(path)


def test_environment_overrides_file(workdir, monkeypatch):
    path = write(workdir / "jobtrack.yaml", "data_file: file.json\nlog_file: file.log\n")
    monkeypatch.setenv("JOBTRACK_DATA_FILE", "env.json")
    monkeypatch.setenv("JOBTRACK_LOG_FILE", "env.log")
    monkeypatch.setenv("NO_COLOR", "1")
    assert load_config(path) == Config(data_file="env.json", log_file="env.log", color=False)


def test_dotenv_file_is_loaded(workdir, monkeypatch):
    # Register the variable with monkeypatch so the value load_dotenv sets is undone
    monkeypatch.setenv("JOBTRACK_DATA_FILE", "placeholder")
    monkeypatch.delenv("JOBTRACK_DATA_FILE")
    write(workdir / ".env", "JOBTRACK_DATA_FILE=dotenv.json\n")
    config = load_config(workdir / "jobtrack.yaml")
    assert config.data_file == "dotenv.json"
