"""Services for Snapshot Manager."""

from snapshot_manager.services.btrfs import BtrfsService
from snapshot_manager.services.command import CommandError, run_command
from snapshot_manager.services.system import SystemService

__all__ = [
    "BtrfsService",
    "CommandError",
    "SystemService",
    "run_command",
]
