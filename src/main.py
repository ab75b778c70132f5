"""Main entry point for the terminal task tracker.

The store is created here, once, and handed to the list screen; nothing
else constructs or looks one up.
"""
import logging
from pathlib import Path
from typing import Optional

import click

from cli import CLI
from logging_setup import setup_logging
from store import TaskStore
from views import TaskListScreen

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--alt-screen/--no-alt-screen", default=True, show_default=True,
              envvar="TASKS_ALT_SCREEN", help="Draw on the terminal's alternate screen.")
@click.option("--log-file", type=click.Path(dir_okay=False, path_type=Path),
              envvar="TASKS_LOG_FILE", default=None, help="Write debug logs to this file.")
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False),
              envvar="TASKS_LOG_LEVEL", default="WARNING", show_default=True,
              help="Level for log lines printed to stderr.")
def main(alt_screen: bool, log_file: Optional[Path], log_level: str) -> None:
    """Track tasks in the terminal. Tasks live only as long as the session."""
    setup_logging(log_file=log_file, level=getattr(logging, log_level.upper()))
    store = TaskStore()
    CLI(TaskListScreen(store), alt_screen=alt_screen).run()


if __name__ == "__main__":
    main()
