"""Screen components for Snapshot Manager."""

from snapshot_manager.ui.screens.main import MainScreen

__all__ = ["MainScreen"]
