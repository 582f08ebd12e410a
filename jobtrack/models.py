"""Data models for tracked job applications."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class JobStatus(Enum):
    SAVED = "saved"
    APPLIED = "applied"
    INTERVIEW = "interview"
    OFFER = "offer"
    REJECTED = "rejected"

    @classmethod
    def parse(cls, token: str | None) -> JobStatus | None:
        """Return the status for an exact, case-sensitive match, else None."""
        if not isinstance(token, str):
            return None
        try:
            return cls(token)
        except ValueError:
            return None


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp, accepting a trailing 'Z' for UTC."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


@dataclass
class JobApplication:
    id: str
    company: str
    role: str
    status: JobStatus
    created_at: str
    notes: str | None = None

    @property
    def created(self) -> datetime:
        return parse_timestamp(self.created_at)

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "company": self.company,
            "role": self.role,
            "status": self.status.value,
            "createdAt": self.created_at,
        }
        if self.notes is not None:
            data["notes"] = self.notes
        return data

    @classmethod
    def from_dict(cls, raw: dict) -> JobApplication:
        """Build an entry from its persisted shape, validating every field.

        Raises ValueError naming the first offending field.
        """
        for field_name in ("id", "company", "role"):
            value = raw.get(field_name)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"field '{field_name}' must be a non-empty string")

        status = JobStatus.parse(raw.get("status"))
        if status is None:
            raise ValueError(f"field 'status' has invalid value {raw.get('status')!r}")

        created_at = raw.get("createdAt")
        if not isinstance(created_at, str):
            raise ValueError("field 'createdAt' must be an ISO-8601 string")
        try:
            parse_timestamp(created_at)
        except ValueError:
            raise ValueError(f"field 'createdAt' is not a valid timestamp: {created_at!r}") from None

        notes = raw.get("notes")
        if notes is not None and not isinstance(notes, str):
            raise ValueError("field 'notes' must be a string")

        return cls(
            id=raw["id"],
            company=raw["company"],
            role=raw["role"],
            status=status,
            created_at=created_at,
            notes=notes,
        )
