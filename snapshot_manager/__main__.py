"""Entry point for Snapshot Manager."""

import logging
import sys
from pathlib import Path

import click

from snapshot_manager.config import Config


def _setup_logging(verbosity: int, log_file: Path | None) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    # The dashboard owns the terminal, so records only go to a file
    if log_file is None:
        logging.basicConfig(level=level, handlers=[logging.NullHandler()])
    else:
        logging.basicConfig(
            level=level,
            filename=str(log_file),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument(
    "btrfs_path",
    metavar="<path to btrfs partition>",
    type=click.Path(file_okay=False, path_type=Path),
)
@click.option("-v", "--verbose", count=True, help="Increase log verbosity (-v info, -vv debug)")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write log records to this file",
)
def main(btrfs_path: Path, verbose: int, log_file: Path | None) -> None:
    """Browse, create and delete btrfs snapshots of active subvolumes."""
    _setup_logging(verbose, log_file)
    config = Config.from_env(btrfs_path)

    from snapshot_manager.ui.app import App

    try:
        app = App(config)
    except Exception as e:
        click.echo(f"Error: failed to initialise terminal: {e}", err=True)
        sys.exit(1)
    sys.exit(app.run())


if __name__ == "__main__":
    main(prog_name="snapshot-manager")
