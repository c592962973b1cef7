"""View state and action orchestration for the dashboard.

The controller owns everything the screen shows: which pane has focus, the
volume and snapshot lists, the open dialog and the text of the info panes.
It has no terminal of its own; the main screen draws whatever state it
finds here after every key.
"""

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from snapshot_manager.config import KEYBINDINGS, Config
from snapshot_manager.models import (
    ActionKind,
    Dialog,
    DialogKind,
    Pane,
    PendingAction,
    SelectableList,
    filter_snapshots,
    group_key,
    snapshot_name,
)
from snapshot_manager.services import BtrfsService, CommandError, SystemService

log = logging.getLogger(__name__)

UP = -1
DOWN = 1

ENTER_KEYS = (KEYBINDINGS["enter"], "\n", "\r")
CANCEL_KEYS = (KEYBINDINGS["cancel"], KEYBINDINGS["escape"])


class ViewController:
    """Focus, selection and dialog state plus the actions that change them."""

    def __init__(
        self,
        config: Config,
        btrfs: BtrfsService,
        system: SystemService,
        clock: Callable[[], datetime] = datetime.now,
        busy: Callable[[str], None] | None = None,
    ) -> None:
        self.config = config
        self.btrfs = btrfs
        self.system = system
        self.clock = clock
        self.busy = busy

        self.focus = Pane.VOLUMES
        self.volumes = SelectableList()
        self.snapshots = SelectableList()
        self.dialog = Dialog()

        self.disk_info = ""
        self.volumes_error: str | None = None
        self.snapshot_info = ""

        self._actions: dict[ActionKind, Callable[[PendingAction], None]] = {
            ActionKind.CREATE_SNAPSHOT: self._create_snapshot,
            ActionKind.DELETE_SNAPSHOT: self._delete_snapshot,
            ActionKind.BALANCE: self._balance,
            ActionKind.GRUB_UPDATE: self._grub_update,
        }

    def list_for(self, pane: Pane) -> SelectableList:
        """List shown in a navigable pane."""
        return self.volumes if pane is Pane.VOLUMES else self.snapshots

    # Data refresh

    def refresh(self) -> None:
        """Reload lists and info panes from the storage tools.

        A failing sub-fetch leaves an error message in its own pane and the
        rest of the dashboard still updates.
        """
        root = self.config.root_path
        try:
            volumes, snapshots = self.btrfs.list_entries(root)
            self.volumes_error = None
        except CommandError as e:
            log.warning("Listing subvolumes failed: %s", e)
            volumes, snapshots = [], []
            self.volumes_error = f"Error: {e}"

        self.volumes.replace(volumes)
        self.snapshots.replace(filter_snapshots(self.volumes.selected, snapshots))

        try:
            self.disk_info = self.system.disk_usage(root)
        except CommandError as e:
            self.disk_info = f"Error getting disk info: {e}"

        self.update_snapshot_info()

    def update_snapshot_info(self) -> None:
        """Show details of the selected snapshot while its pane has focus."""
        snapshot = self.snapshots.selected
        if self.focus is not Pane.SNAPSHOTS or snapshot is None:
            self.snapshot_info = ""
            return

        try:
            info = self.btrfs.entry_metadata(self.config.full_path(snapshot))
        except CommandError as e:
            self.snapshot_info = f"Error getting snapshot info: {e}"
            return
        self.snapshot_info = f"Snapshot information:\n{info}"

    # Navigation

    def switch_focus_next(self) -> None:
        if self.dialog.is_open:
            return
        self._set_focus(self.focus.next())

    def switch_focus_prev(self) -> None:
        if self.dialog.is_open:
            return
        self._set_focus(self.focus.prev())

    def _set_focus(self, pane: Pane) -> None:
        self.focus = pane
        if pane is Pane.VOLUMES:
            # Snapshot filter depends on the volume selection
            self.refresh()
        else:
            self.update_snapshot_info()

    def move_selection(self, direction: int) -> None:
        """Move the cursor of the focused list up (-1) or down (+1)."""
        if self.dialog.is_open:
            return
        items = self.list_for(self.focus)
        if not items:
            return

        if direction < 0:
            items.move_up()
        else:
            items.move_down()

        if self.focus is Pane.VOLUMES:
            self.refresh()
        else:
            self.update_snapshot_info()

    # Actions

    def request_create_snapshot(self) -> None:
        """Ask to snapshot the selected volume."""
        if self.dialog.is_open:
            return
        volume = self.volumes.selected
        if volume is None:
            return
        name = snapshot_name(self.config.snapshot_prefix, volume, self.clock())
        if name is None:
            return

        action = PendingAction(
            ActionKind.CREATE_SNAPSHOT,
            source=str(self.config.full_path(volume)),
            target=str(self.config.full_path(name)),
        )
        self._confirm(
            f"Are you sure you want to create snapshot for:\n{volume}?\n\nNew snapshot: {name}",
            action,
        )

    def request_delete_snapshot(self) -> None:
        """Ask to delete the selected snapshot."""
        if self.dialog.is_open:
            return
        snapshot = self.snapshots.selected
        if snapshot is None:
            return

        action = PendingAction(
            ActionKind.DELETE_SNAPSHOT,
            target=str(self.config.full_path(snapshot)),
        )
        self._confirm(
            f"Are you sure you want to delete snapshot:\n{snapshot}?", action
        )

    def request_balance(self) -> None:
        """Ask to run a btrfs balance on the managed filesystem."""
        if self.dialog.is_open:
            return
        action = PendingAction(ActionKind.BALANCE, target=str(self.config.root_path))
        self._confirm(
            "Are you sure you want to execute btrfs balance?\n"
            "This operation may take a long time.",
            action,
        )

    def request_grub_update(self) -> None:
        """Regenerate the GRUB config right away and report the result."""
        if self.dialog.is_open:
            return
        self.run_action(PendingAction(ActionKind.GRUB_UPDATE))

    def run_action(self, action: PendingAction) -> None:
        """Execute an action; results and failures end up in a dialog."""
        log.info("Running %s", action.describe())
        self._actions[action.kind](action)

    def _confirm(self, message: str, action: PendingAction) -> None:
        if self.dialog.open_confirm("Action Confirmation", message, action, self.focus):
            log.debug("Awaiting confirmation for %s", action.describe())

    def _inform(self, title: str, message: str) -> None:
        self.dialog.open_info(title, message, self.focus)

    def _notify_busy(self, message: str) -> None:
        if self.busy is not None:
            self.busy(message)

    def _create_snapshot(self, action: PendingAction) -> None:
        assert action.source is not None and action.target is not None
        self._notify_busy(f"Creating snapshot {action.target}...")
        try:
            self.btrfs.create_snapshot(Path(action.source), Path(action.target))
        except CommandError as e:
            self._inform("Snapshot Error", f"Error creating snapshot:\n{e}")
            return
        self.refresh()

    def _delete_snapshot(self, action: PendingAction) -> None:
        assert action.target is not None
        self._notify_busy(f"Deleting snapshot {action.target}...")
        try:
            self.btrfs.delete_snapshot(Path(action.target))
        except CommandError as e:
            self._inform("Snapshot Error", f"Error deleting snapshot:\n{e}")
            return
        self.refresh()

    def _balance(self, action: PendingAction) -> None:
        self._notify_busy("Running btrfs balance, this may take a while...")
        try:
            output = self.btrfs.balance(self.config.root_path)
        except CommandError as e:
            self._inform("Btrfs Balance", f"Error executing btrfs balance:\n{e}")
            return
        self.refresh()
        self._inform("Btrfs Balance", f"Btrfs balance completed:\n{output}")

    def _grub_update(self, action: PendingAction) -> None:
        self._notify_busy("Updating GRUB configuration...")
        try:
            output = self.system.regenerate_boot_config()
        except CommandError as e:
            self._inform("GRUB Update", f"Error updating GRUB:\n{e}")
            return
        self._inform("GRUB Update", f"GRUB successfully updated:\n{output}")

    # Dialog keys

    def commit_dialog(self) -> None:
        result = self.dialog.commit()
        if result is None:
            return
        action, focus = result
        self.focus = focus
        self.run_action(action)

    def cancel_dialog(self) -> None:
        focus = self.dialog.cancel()
        if focus is not None:
            log.debug("Confirmation cancelled")
            self.focus = focus

    def acknowledge_dialog(self) -> None:
        focus = self.dialog.acknowledge()
        if focus is not None:
            self.focus = focus

    # Hotkeys

    def hotkey_legend(self) -> list[tuple[str, str]]:
        """Keys that do something right now, with their labels."""
        if self.dialog.kind is DialogKind.INFO:
            return [("Enter", "Close")]
        if self.dialog.kind is DialogKind.CONFIRM:
            return [("Enter", "Execute"), ("c/Esc", "Cancel")]

        keys: list[tuple[str, str]] = [("q", "Quit"), ("←/→", "Switch view")]
        if self.list_for(self.focus):
            keys.append(("↑/↓", "Navigate"))
        keys.append(("g", "Update GRUB"))
        keys.append(("b", "Btrfs balance"))
        if self.focus is Pane.VOLUMES and self._can_create():
            keys.append(("t", "Create snapshot"))
        elif self.focus is Pane.SNAPSHOTS and self.snapshots:
            keys.append(("r", "Remove snapshot"))
        return keys

    def hotkey_legend_text(self) -> str:
        return " | ".join(f"{key}: {label}" for key, label in self.hotkey_legend())

    def _can_create(self) -> bool:
        volume = self.volumes.selected
        return volume is not None and group_key(volume) is not None

    def handle_key(self, key: str) -> str | None:
        """Handle key input. Returns action name or None."""
        if self.dialog.kind is DialogKind.INFO:
            if key in ENTER_KEYS:
                self.acknowledge_dialog()
            return None
        if self.dialog.kind is DialogKind.CONFIRM:
            if key in ENTER_KEYS:
                self.commit_dialog()
            elif key in CANCEL_KEYS:
                self.cancel_dialog()
            return None

        if key == KEYBINDINGS["quit"]:
            return "quit"
        elif key == KEYBINDINGS["left"]:
            self.switch_focus_prev()
        elif key == KEYBINDINGS["right"]:
            self.switch_focus_next()
        elif key == KEYBINDINGS["up"]:
            self.move_selection(UP)
        elif key == KEYBINDINGS["down"]:
            self.move_selection(DOWN)
        elif key == KEYBINDINGS["create"] and self.focus is Pane.VOLUMES:
            self.request_create_snapshot()
        elif key == KEYBINDINGS["remove"] and self.focus is Pane.SNAPSHOTS:
            self.request_delete_snapshot()
        elif key == KEYBINDINGS["grub"]:
            self.request_grub_update()
        elif key == KEYBINDINGS["balance"]:
            self.request_balance()
        return None
