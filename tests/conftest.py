"""Shared fixtures for the jobtrack test suite."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

import pytest

from jobtrack.models import JobApplication, JobStatus
from jobtrack.store import JobStore

FIXED_NOW = datetime(2024, 5, 1, 9, 30, 0, 123456, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every test from an empty directory with no jobtrack environment."""
    for name in ("JOBTRACK_DATA_FILE", "JOBTRACK_LOG_FILE", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def data_file(workdir: Path) -> Path:
    return workdir / "jobs.json"


@pytest.fixture
def store(data_file: Path) -> JobStore:
    return JobStore(data_file)


def make_job(
    job_id: str = "1714555800123-aaaa",
    company: str = "Acme",
    role: str = "Engineer",
    status: JobStatus = JobStatus.SAVED,
    created_at: str = "2024-05-01T09:30:00.123Z",
    notes: str | None = None,
) -> JobApplication:
    return JobApplication(
        id=job_id,
        company=company,
        role=role,
        status=status,
        created_at=created_at,
        notes=notes,
    )


@pytest.fixture
def sample_jobs() -> list[JobApplication]:
    return [
        make_job("3-ccc", "Initech", "SRE", JobStatus.INTERVIEW, "2024-05-03T12:00:00.000Z"),
        make_job("2-bbb", "Globex", "Data Scientist", JobStatus.APPLIED, notes="via referral"),
        make_job("1-aaa", "Acme", "Engineer", JobStatus.SAVED, "2024-04-30T08:15:00.500Z"),
    ]


def read_raw(path: Path) -> list[dict]:
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger("jobtrack")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
