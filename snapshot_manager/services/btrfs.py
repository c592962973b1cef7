"""Btrfs service for listing and managing subvolumes."""

import logging
from pathlib import Path

from snapshot_manager.config import BALANCE_USAGE_FILTER, BTRFS_BIN, Config
from snapshot_manager.services.command import CommandError, run_command

log = logging.getLogger(__name__)

PATH_MARKER = "path "


class BtrfsService:
    """Service for interacting with the btrfs tool."""

    def __init__(self, config: Config) -> None:
        self.config = config

    def list_entries(self, root: Path) -> tuple[list[str], list[str]]:
        """List subvolumes under root, split into (volumes, snapshots).

        Lines look like ``ID 256 gen 9 top level 5 path _active/web``; only
        paths under the configured prefixes are kept.
        """
        output = run_command([BTRFS_BIN, "subvolume", "list", str(root)])

        volumes: list[str] = []
        snapshots: list[str] = []
        volume_prefix = self.config.subvolume_prefix + "/"
        snapshot_prefix = self.config.snapshot_prefix + "/"

        for line in output.splitlines():
            if not line.strip() or PATH_MARKER not in line:
                continue
            path = line[line.index(PATH_MARKER) + len(PATH_MARKER):].strip()
            if path.startswith(volume_prefix):
                volumes.append(path)
            elif path.startswith(snapshot_prefix):
                snapshots.append(path)

        return volumes, snapshots

    def entry_metadata(self, path: Path) -> str:
        """Get the ``btrfs subvolume show`` report for one subvolume."""
        return run_command([BTRFS_BIN, "subvolume", "show", str(path)])

    def create_snapshot(self, source: Path, dest: Path) -> None:
        """Create a snapshot of source at dest."""
        try:
            run_command([BTRFS_BIN, "subvolume", "snapshot", str(source), str(dest)])
        except CommandError as e:
            raise CommandError(f"Failed to create snapshot: {e}") from e
        log.info("Created snapshot %s from %s", dest, source)

    def delete_snapshot(self, path: Path) -> None:
        """Delete a snapshot subvolume."""
        try:
            run_command([BTRFS_BIN, "subvolume", "delete", str(path)])
        except CommandError as e:
            raise CommandError(f"Failed to delete snapshot: {e}") from e
        log.info("Deleted snapshot %s", path)

    def balance(self, root: Path) -> str:
        """Run a data balance on mostly empty chunks. Returns tool output."""
        return run_command(
            [
                BTRFS_BIN,
                "balance",
                "start",
                f"-dusage={BALANCE_USAGE_FILTER}",
                str(root),
            ],
            combined=True,
        )
