"""Shared utilities: logging, id generation, and timestamps."""

import logging
import secrets
import sys
import time
from datetime import datetime, timezone
from pathlib import Path


def setup_logging(verbose: bool = False, log_file: str = "") -> logging.Logger:
    """Configure console + optional file logging. Returns the root project logger.

    Console output goes to stderr; stdout carries command output only.
    """
    logger = logging.getLogger("jobtrack")
    logger.setLevel(logging.DEBUG)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(logging.DEBUG if verbose else logging.WARNING)
    fmt = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s", datefmt="%H:%M:%S")
    console.setFormatter(fmt)
    logger.addHandler(console)

    if log_file:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


def make_job_id(existing: set[str] | frozenset[str] = frozenset()) -> str:
    """Return a new opaque id: epoch milliseconds plus random hex.

    Regenerates until the id is not in ``existing``.
    """
    while True:
        job_id = f"{int(time.time() * 1000)}-{secrets.token_hex(6)}"
        if job_id not in existing:
            return job_id


def utc_timestamp(now: datetime | None = None) -> str:
    """Render an instant as ISO-8601 UTC with millisecond precision, e.g. 2024-05-01T09:30:00.123Z."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    now = now.astimezone(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"
