"""CLI entry point for record-actions."""

import argparse
import logging

import record_actions.io.logging_setup
from record_actions.tui.app import RecordEditorApp

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Record editor with the record action bar")
    parser.add_argument("--start", type=str, default=None, help="Record id to open first")
    cycle = parser.add_mutually_exclusive_group()
    cycle.add_argument(
        "--cycle",
        dest="cycle",
        action="store_true",
        default=None,
        help="Wrap prev/next around the table ends (default: from settings)",
    )
    cycle.add_argument("--no-cycle", dest="cycle", action="store_false", help="Stop prev/next at the table ends")
    parser.add_argument(
        "--read-only",
        action="store_true",
        help="Run without a command dispatcher (clone/add/delete/revert disabled)",
    )
    args = parser.parse_args(argv)

    # stderr belongs to the TUI; log to file only.
    runtime = record_actions.io.logging_setup.configure(stream=False)
    logger.info("logging to %s at %s", runtime.file_path, runtime.level_name)

    app = RecordEditorApp(start_id=args.start, cycle=args.cycle, with_dispatcher=not args.read_only)
    app.run()


if __name__ == "__main__":
    main()
