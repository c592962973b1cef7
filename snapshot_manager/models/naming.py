"""Subvolume naming rules.

Subvolumes are listed as ``<category>/<base>-<suffix>``, e.g.
``_active/web-prod`` or ``_snapshots/web-20240101-120000``. The ``<base>``
part is the group key that ties a snapshot to the subvolume it was taken
from.
"""

from datetime import datetime

from snapshot_manager.config import TIMESTAMP_FORMAT

PATH_SEPARATOR = "/"
BASE_SEPARATOR = "-"


def group_key(path: str) -> str | None:
    """Return the base name of a subvolume path, or None if ungroupable.

    A path needs a non-empty segment after the category to be grouped. The
    base itself may be empty (``_active/-x`` groups under ``""``).
    """
    parts = path.split(PATH_SEPARATOR)
    if len(parts) < 2 or not parts[1]:
        return None
    return parts[1].split(BASE_SEPARATOR, 1)[0]


def snapshot_timestamp(moment: datetime) -> str:
    """Sortable timestamp suffix for a new snapshot."""
    return moment.strftime(TIMESTAMP_FORMAT)


def snapshot_name(prefix: str, volume: str, moment: datetime) -> str | None:
    """Name for a new snapshot of ``volume`` taken at ``moment``."""
    base = group_key(volume)
    if base is None:
        return None
    return f"{prefix}{PATH_SEPARATOR}{base}{BASE_SEPARATOR}{snapshot_timestamp(moment)}"


def filter_snapshots(volume: str | None, snapshots: list[str]) -> list[str]:
    """Snapshots that belong to ``volume``, in their original order."""
    if volume is None:
        return []
    key = group_key(volume)
    if key is None:
        return []
    return [snap for snap in snapshots if group_key(snap) == key]
