"""Load the optional YAML configuration file and environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import yaml
from dotenv import find_dotenv, load_dotenv

from jobtrack.errors import ConfigError

DEFAULT_CONFIG_PATH = "jobtrack.yaml"
DEFAULT_DATA_FILE = "jobs.json"


@dataclass
class Config:
    data_file: str = DEFAULT_DATA_FILE
    log_file: str = ""
    color: bool = True


def load_config(config_path: Path, required: bool = False) -> Config:
    """Load .env and the config file, apply environment overrides, return Config.

    A missing config file yields defaults unless ``required`` is set.
    """
    load_dotenv(find_dotenv(usecwd=True))

    raw: dict = {}
    if config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e
        if not isinstance(raw, dict):
            raise ConfigError(f"Config {config_path} must be a mapping of settings.")
    elif required:
        raise ConfigError(
            f"Config not found: {config_path}\n"
            "Copy config.example.yaml to jobtrack.yaml and adjust it, or drop --config."
        )

    data_file = raw.get("data_file", DEFAULT_DATA_FILE)
    log_file = raw.get("log_file", "") or ""
    color = raw.get("color", True)

    if not isinstance(data_file, str) or not data_file.strip():
        raise ConfigError("Config field data_file must be a non-empty path.")
    if not isinstance(log_file, str):
        raise ConfigError("Config field log_file must be a path.")
    if not isinstance(color, bool):
        raise ConfigError("Config field color must be true or false.")

    # Environment wins over the file
    data_file = os.getenv("JOBTRACK_DATA_FILE") or data_file
    log_file = os.getenv("JOBTRACK_LOG_FILE", log_file)
    if os.getenv("NO_COLOR") is not None:
        color = False

    return Config(data_file=data_file, log_file=log_file, color=color)
