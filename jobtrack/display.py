"""Terminal output for confirmations, listings, and usage help.

Colour codes are only emitted when enabled and stdout is a terminal, so
piped or captured output is plain text.
"""

from __future__ import annotations

import sys

from jobtrack.models import JobApplication, JobStatus

# ANSI color helpers
BOLD = "\033[1m"
DIM = "\033[2m"
RED = "\033[91m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
CYAN = "\033[96m"
RESET = "\033[0m"

STATUS_COLORS = {
    JobStatus.SAVED: DIM,
    JobStatus.APPLIED: CYAN,
    JobStatus.INTERVIEW: YELLOW,
    JobStatus.OFFER: GREEN,
    JobStatus.REJECTED: RED,
}

HELP_TEXT = f"""
Job Tracker

Commands:
  add "<company>" "<role>" [status] [notes]
  list
  update <id> <status>
  remove <id>
  help

Statuses: {" | ".join(s.value for s in JobStatus)}

Examples:
  jobtrack add "Google" "Software Engineer" applied "Reached out via referral"
  jobtrack list
  jobtrack update 1700000000000-ab12cd34ef56 interview
  jobtrack remove 1700000000000-ab12cd34ef56
"""

EMPTY_MESSAGE = 'No jobs saved yet. Add one with: jobtrack add "Company" "Role"'


def format_created(job: JobApplication) -> str:
    """Render the creation instant in local time."""
    return job.created.astimezone().strftime("%Y-%m-%d %H:%M:%S")


class JobPrinter:
    """Writes command results to stdout and failures to stderr."""

    def __init__(self, color: bool = True):
        self._color = color and sys.stdout.isatty()
        self._err_color = color and sys.stderr.isatty()

    def _c(self, code: str, text: str) -> str:
        return f"{code}{text}{RESET}" if self._color else text

    def added(self, job: JobApplication) -> None:
        print(self._c(GREEN, f"✅ Added: {job.company} — {job.role} ({job.status.value})"))
        print(f"   id: {self._c(DIM, job.id)}")

    def listing(self, jobs: list[JobApplication]) -> None:
        if not jobs:
            print(EMPTY_MESSAGE)
            return

        print(self._c(BOLD, f"\n📌 Job Applications ({len(jobs)})\n"))
        for job in jobs:
            print(f"- {self._c(BOLD, job.company)} — {job.role}")
            print(f"  id: {self._c(DIM, job.id)}")
            print(f"  status: {self._c(STATUS_COLORS[job.status], job.status.value)}")
            print(f"  created: {format_created(job)}")
            if job.notes:
                print(f"  notes: {job.notes}")
            print("")

    def updated(self, job: JobApplication) -> None:
        print(self._c(GREEN, f"✅ Updated {job.id} → {job.status.value}"))

    def removed(self, job_id: str) -> None:
        print(self._c(GREEN, f"🗑️ Removed {job_id}"))

    def help(self) -> None:
        print(HELP_TEXT)

    def error(self, message: str) -> None:
        print(f"{RED}{message}{RESET}" if self._err_color else message, file=sys.stderr)
