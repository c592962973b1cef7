"""Snapshot Manager: terminal dashboard for btrfs subvolume snapshots."""

__version__ = "0.1.0"
