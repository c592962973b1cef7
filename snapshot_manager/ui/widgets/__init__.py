"""UI widgets for Snapshot Manager."""

from snapshot_manager.ui.widgets.dialog import BusyView, DialogView
from snapshot_manager.ui.widgets.list_view import ListView

__all__ = [
    "BusyView",
    "DialogView",
    "ListView",
]
