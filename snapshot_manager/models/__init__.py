"""Data models for Snapshot Manager."""

from snapshot_manager.models.dialog import ActionKind, Dialog, DialogKind, PendingAction
from snapshot_manager.models.naming import (
    filter_snapshots,
    group_key,
    snapshot_name,
    snapshot_timestamp,
)
from snapshot_manager.models.pane import Pane
from snapshot_manager.models.selectable_list import SelectableList

__all__ = [
    "ActionKind",
    "Dialog",
    "DialogKind",
    "PendingAction",
    "Pane",
    "SelectableList",
    "filter_snapshots",
    "group_key",
    "snapshot_name",
    "snapshot_timestamp",
]
