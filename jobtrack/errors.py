"""Errors reported to the user at the command-line boundary."""

from __future__ import annotations

from pathlib import Path


class JobTrackError(Exception):
    """Base class. Every subclass aborts the command with exit status 1."""

    show_help = False


class MissingArgumentError(JobTrackError):
    def __init__(self, name: str):
        super().__init__(f"Missing required argument: {name}")
        self.name = name


class InvalidStatusError(JobTrackError):
    show_help = True

    def __init__(self, value: str):
        super().__init__(f"Invalid status: {value}")
        self.value = value


class JobNotFoundError(JobTrackError):
    def __init__(self, job_id: str):
        super().__init__(f"No job found with id: {job_id}")
        self.job_id = job_id


class CorruptStoreError(JobTrackError):
    def __init__(self, path: Path | str, reason: str):
        super().__init__(f"Job store {path} is corrupt: {reason}")
        self.path = Path(path)
        self.reason = reason


class UnknownCommandError(JobTrackError):
    show_help = True

    def __init__(self, command: str):
        super().__init__(f"Unknown command: {command}")
        self.command = command


class ConfigError(JobTrackError):
    pass


class StoreWriteError(JobTrackError):
    def __init__(self, path: Path | str, reason: str):
        super().__init__(f"Cannot write job store {path}: {reason}")
        self.path = Path(path)
        self.reason = reason
