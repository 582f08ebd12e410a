"""Add, update, and remove over the in-memory job collection.

These functions never touch the disk; the caller persists the collection
once an operation has succeeded.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from jobtrack.errors import InvalidStatusError, JobNotFoundError, MissingArgumentError
from jobtrack.models import JobApplication, JobStatus
from jobtrack.utils import make_job_id, utc_timestamp

logger = logging.getLogger("jobtrack")


def require_arg(value: str | None, name: str) -> str:
    """Return value, or raise MissingArgumentError if it is absent or blank."""
    if not isinstance(value, str) or not value.strip():
        raise MissingArgumentError(name)
    return value


def parse_add_args(args: list[str]) -> tuple[str, str, JobStatus, str | None]:
    """Split ``add`` tokens into company, role, status, and notes.

    The third token is the status only if it is an exact status value;
    otherwise it is the first word of the notes.
    """
    company = require_arg(args[0] if len(args) > 0 else None, "company")
    role = require_arg(args[1] if len(args) > 1 else None, "role")

    rest = args[2:]
    status = JobStatus.parse(rest[0]) if rest else None
    if status is not None:
        rest = rest[1:]

    notes = " ".join(rest) or None
    return company, role, status or JobStatus.SAVED, notes


def add_job(
    jobs: list[JobApplication],
    company: str,
    role: str,
    status: JobStatus = JobStatus.SAVED,
    notes: str | None = None,
    now: datetime | None = None,
    id_factory: Callable[[set[str]], str] = make_job_id,
) -> tuple[list[JobApplication], JobApplication]:
    """Create an entry and return (new collection with it prepended, entry)."""
    job = JobApplication(
        id=id_factory({j.id for j in jobs}),
        company=company,
        role=role,
        status=status,
        created_at=utc_timestamp(now),
        notes=notes,
    )
    logger.debug("Adding %s at %s [%s] as %s.", role, company, status.value, job.id)
    return [job, *jobs], job


def find_job(jobs: list[JobApplication], job_id: str) -> JobApplication | None:
    for job in jobs:
        if job.id == job_id:
            return job
    return None


def update_status(jobs: list[JobApplication], job_id: str, status_token: str) -> JobApplication:
    """Set the status of the entry with ``job_id`` in place and return it."""
    status = JobStatus.parse(status_token)
    if status is None:
        raise InvalidStatusError(status_token)

    job = find_job(jobs, job_id)
    if job is None:
        raise JobNotFoundError(job_id)

    logger.debug("Updating %s: %s -> %s.", job_id, job.status.value, status.value)
    job.status = status
    return job


def remove_job(jobs: list[JobApplication], job_id: str) -> list[JobApplication]:
    """Return the collection without any entry whose id is ``job_id``."""
    remaining = [job for job in jobs if job.id != job_id]
    if len(remaining) == len(jobs):
        raise JobNotFoundError(job_id)
    logger.debug("Removed %d entry(ies) with id %s.", len(jobs) - len(remaining), job_id)
    return remaining
