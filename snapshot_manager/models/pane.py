"""Navigable panes."""

from enum import Enum


class Pane(Enum):
    """Pane that receives navigation keys."""

    VOLUMES = 0
    SNAPSHOTS = 1

    @property
    def display_name(self) -> str:
        """Pane title."""
        names: dict[Pane, str] = {
            Pane.VOLUMES: "Subvolumes",
            Pane.SNAPSHOTS: "Snapshots",
        }
        return names[self]

    def next(self) -> "Pane":
        members = list(Pane)
        return members[(members.index(self) + 1) % len(members)]

    def prev(self) -> "Pane":
        members = list(Pane)
        return members[(members.index(self) - 1) % len(members)]
