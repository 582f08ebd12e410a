#!/usr/bin/env python3
"""jobtrack - track job applications in a local JSON file.

Usage:
    python main.py add "Acme" "Engineer" applied "Referral from Sam"
    python main.py list
    python main.py update <id> interview
    python main.py remove <id>
    python main.py --data-file ~/jobs.json list   # Options go before the command
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from jobtrack.config_loader import DEFAULT_CONFIG_PATH, load_config
from jobtrack.display import JobPrinter
from jobtrack.errors import ConfigError, JobTrackError, UnknownCommandError
from jobtrack.operations import (
    add_job,
    parse_add_args,
    remove_job,
    require_arg,
    update_status,
)
from jobtrack.store import JobStore
from jobtrack.utils import setup_logging

logger = logging.getLogger("jobtrack")


def _arg(args: list[str], index: int) -> str | None:
    return args[index] if len(args) > index else None


def run_add(store: JobStore, printer: JobPrinter, args: list[str]) -> None:
    company, role, status, notes = parse_add_args(args)
    jobs = store.load()
    jobs, job = add_job(jobs, company, role, status, notes)
    store.save(jobs)
    printer.added(job)


def run_list(store: JobStore, printer: JobPrinter, args: list[str]) -> None:
    printer.listing(store.load())


def run_update(store: JobStore, printer: JobPrinter, args: list[str]) -> None:
    job_id = require_arg(_arg(args, 0), "id")
    status = require_arg(_arg(args, 1), "status")
    jobs = store.load()
    job = update_status(jobs, job_id, status)
    store.save(jobs)
    printer.updated(job)


def run_remove(store: JobStore, printer: JobPrinter, args: list[str]) -> None:
    job_id = require_arg(_arg(args, 0), "id")
    jobs = remove_job(store.load(), job_id)
    store.save(jobs)
    printer.removed(job_id)


COMMANDS = {
    "add": run_add,
    "list": run_list,
    "update": run_update,
    "remove": run_remove,
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="jobtrack",
        description="Track job applications in a local JSON file.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Commands: add, list, update, remove, help. Run 'jobtrack help' for details.",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help=f"Path to config file (default: {DEFAULT_CONFIG_PATH}, optional).",
    )
    parser.add_argument(
        "--data-file",
        type=str,
        default=None,
        help="Path to the jobs JSON file (default: jobs.json in the current directory).",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable coloured output.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument("command", nargs="?", default="help", help="Command to run.")
    parser.add_argument("args", nargs=argparse.REMAINDER, help="Command arguments.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    printer = JobPrinter(color=not args.no_color)

    try:
        config = load_config(
            Path(args.config or DEFAULT_CONFIG_PATH),
            required=args.config is not None,
        )
        try:
            setup_logging(verbose=args.verbose, log_file=config.log_file)
        except OSError as e:
            raise ConfigError(f"Cannot open log file {config.log_file}: {e.strerror or e}") from e
        printer = JobPrinter(color=config.color and not args.no_color)

        if args.command == "help":
            printer.help()
            return 0

        handler = COMMANDS.get(args.command)
        if handler is None:
            raise UnknownCommandError(args.command)

        data_file = Path(args.data_file or config.data_file).expanduser()
        if not data_file.is_absolute():
            data_file = Path.cwd() / data_file
        store = JobStore(data_file)
        logger.debug("Running %s against %s.", args.command, store.path)

        handler(store, printer, args.args)
    except JobTrackError as e:
        printer.error(str(e))
        if e.show_help:
            printer.help()
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
