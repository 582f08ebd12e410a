"""JSON-file persistence for the job application collection.

The whole collection lives in a single pretty-printed JSON array. Every
mutating command rewrites the file in full; there is no locking, so two
concurrent invocations against the same file race and the last writer wins.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from collections import Counter
from pathlib import Path

from jobtrack.errors import CorruptStoreError, StoreWriteError
from jobtrack.models import JobApplication

logger = logging.getLogger("jobtrack")


class JobStore:
    """Load and save the job collection at a fixed path."""

    def __init__(self, path: Path | str):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def exists(self) -> bool:
        return self._path.exists()

    def load(self) -> list[JobApplication]:
        """Return the stored collection, newest first.

        A missing file is an empty collection. Anything that does not parse
        into valid entries raises CorruptStoreError.
        """
        if not self._path.exists():
            logger.debug("No job store at %s, starting empty.", self._path)
            return []

        try:
            with open(self._path, encoding="utf-8") as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            raise CorruptStoreError(self._path, f"invalid JSON ({e})") from e
        except UnicodeDecodeError as e:
            raise CorruptStoreError(self._path, "file is not UTF-8 text") from e
        except OSError as e:
            raise CorruptStoreError(self._path, f"cannot be read ({e.strerror})") from e

        if not isinstance(raw, list):
            raise CorruptStoreError(self._path, "top level must be a JSON array")

        jobs: list[JobApplication] = []
        for index, item in enumerate(raw):
            if not isinstance(item, dict):
                raise CorruptStoreError(self._path, f"entry {index} is not an object")
            try:
                jobs.append(JobApplication.from_dict(item))
            except ValueError as e:
                raise CorruptStoreError(self._path, f"entry {index}: {e}") from e

        duplicates = [job_id for job_id, count in Counter(j.id for j in jobs).items() if count > 1]
        if duplicates:
            logger.warning("Duplicate job ids in %s: %s", self._path, ", ".join(duplicates))

        logger.debug("Loaded %d jobs from %s.", len(jobs), self._path)
        return jobs

    def save(self, jobs: list[JobApplication]) -> None:
        """Overwrite the store with the full collection."""
        payload = json.dumps([job.to_dict() for job in jobs], indent=2, ensure_ascii=False)

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            # Temp file in the same directory so os.replace stays on one filesystem
            fd, tmp_path = tempfile.mkstemp(
                dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
            )
        except OSError as e:
            raise StoreWriteError(self._path, e.strerror or str(e)) from e

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_path, self._path)
        except BaseException as e:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            if isinstance(e, OSError):
                raise StoreWriteError(self._path, e.strerror or str(e)) from e
            raise

        logger.debug("Saved %d jobs to %s.", len(jobs), self._path)
