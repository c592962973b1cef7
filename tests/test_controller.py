"""Tests for the view controller."""

from __future__ import annotations

from pathlib import Path

from conftest import ROOT

from snapshot_manager.controller import DOWN, UP
from snapshot_manager.models import ActionKind, DialogKind, Pane


def legend_keys(controller) -> list[str]:
    return [key for key, _ in controller.hotkey_legend()]


class TestRefresh:
    def test_initial_state(self, controller):
        assert controller.focus is Pane.VOLUMES
        assert controller.volumes.items == ["_active/web-1", "_active/db-1"]
        assert controller.snapshots.items == ["_snapshots/web-20240101-000000"]
        assert controller.disk_info.startswith("FS: /dev/sda2")
        assert controller.snapshot_info == ""

    def test_snapshots_follow_volume_selection(self, controller):
        controller.move_selection(DOWN)
        assert controller.volumes.selected == "_active/db-1"
        assert controller.snapshots.items == ["_snapshots/db-20240101-000000"]

        controller.move_selection(UP)
        assert controller.snapshots.items == ["_snapshots/web-20240101-000000"]

    def test_filter_keeps_relative_order(self, controller, btrfs):
        btrfs.snapshots = [
            "_snapshots/web-3",
            "_snapshots/db-1",
            "_snapshots/web-1",
            "_snapshots/web-2",
        ]
        controller.refresh()
        assert controller.snapshots.items == ["_snapshots/web-3", "_snapshots/web-1", "_snapshots/web-2"]

    def test_snapshot_selection_clamped_when_list_shrinks(self, controller, btrfs):
        btrfs.snapshots = ["_snapshots/web-1", "_snapshots/web-2", "_snapshots/web-3"]
        controller.refresh()
        controller.switch_focus_next()
        controller.move_selection(DOWN)
        controller.move_selection(DOWN)
        assert controller.snapshots.selection == 2

        btrfs.snapshots = ["_snapshots/web-1"]
        controller.refresh()
        assert controller.snapshots.selection == 0
        assert controller.snapshots.selected == "_snapshots/web-1"

    def test_listing_error_is_shown_inline(self, controller, btrfs):
        btrfs.list_error = "ERROR: not a btrfs filesystem"
        controller.refresh()
        assert controller.volumes_error == "Error: ERROR: not a btrfs filesystem"
        assert len(controller.volumes) == 0
        assert len(controller.snapshots) == 0
        # Disk info still updated
        assert controller.disk_info.startswith("FS:")

        btrfs.list_error = None
        controller.refresh()
        assert controller.volumes_error is None
        assert len(controller.volumes) == 2

    def test_disk_error_is_shown_inline(self, controller, system):
        system.disk_error = "df: /mnt/pool: No such file or directory"
        controller.refresh()
        assert controller.disk_info == "Error getting disk info: df: /mnt/pool: No such file or directory"
        assert len(controller.volumes) == 2

    def test_ungroupable_volume_has_no_snapshots(self, controller, btrfs):
        btrfs.volumes = ["_active/"]
        controller.refresh()
        assert controller.volumes.items == ["_active/"]
        assert len(controller.snapshots) == 0


class TestFocus:
    def test_switch_to_snapshots_loads_metadata_only(self, controller, btrfs):
        lists_before = len(btrfs.called("list"))
        controller.switch_focus_next()
        assert controller.focus is Pane.SNAPSHOTS
        assert len(btrfs.called("list")) == lists_before
        assert btrfs.called("show")[-1][1] == ROOT / "_snapshots/web-20240101-000000"
        assert controller.snapshot_info.startswith("Snapshot information:")

    def test_switch_back_to_volumes_refreshes(self, controller, btrfs):
        controller.switch_focus_next()
        lists_before = len(btrfs.called("list"))
        controller.switch_focus_prev()
        assert controller.focus is Pane.VOLUMES
        assert len(btrfs.called("list")) == lists_before + 1
        assert controller.snapshot_info == ""

    def test_focus_cycles(self, controller):
        controller.switch_focus_next()
        controller.switch_focus_next()
        assert controller.focus is Pane.VOLUMES
        controller.switch_focus_prev()
        assert controller.focus is Pane.SNAPSHOTS

    def test_focus_switch_ignored_while_confirming(self, controller):
        controller.request_balance()
        controller.switch_focus_next()
        controller.switch_focus_prev()
        assert controller.focus is Pane.VOLUMES
        assert controller.dialog.kind is DialogKind.CONFIRM

    def test_metadata_error_is_shown_inline(self, controller, btrfs):
        btrfs.metadata_error = "ERROR: cannot find subvolume"
        controller.switch_focus_next()
        assert controller.snapshot_info == "Error getting snapshot info: ERROR: cannot find subvolume"

    def test_no_metadata_without_snapshot(self, controller, btrfs):
        btrfs.snapshots = []
        controller.refresh()
        controller.switch_focus_next()
        assert controller.snapshot_info == ""
        assert btrfs.called("show") == []


class TestMoveSelection:
    def test_empty_focused_list_is_noop(self, controller, btrfs):
        btrfs.snapshots = []
        controller.refresh()
        controller.switch_focus_next()
        calls_before = list(btrfs.calls)
        controller.move_selection(DOWN)
        assert btrfs.calls == calls_before

    def test_ignored_while_dialog_open(self, controller):
        controller.request_grub_update()
        controller.move_selection(DOWN)
        assert controller.volumes.selection == 0

    def test_snapshot_move_updates_metadata_only(self, controller, btrfs):
        btrfs.snapshots = ["_snapshots/web-1", "_snapshots/web-2"]
        controller.refresh()
        controller.switch_focus_next()
        lists_before = len(btrfs.called("list"))
        controller.move_selection(DOWN)
        assert controller.snapshots.selected == "_snapshots/web-2"
        assert len(btrfs.called("list")) == lists_before
        assert btrfs.called("show")[-1][1] == ROOT / "_snapshots/web-2"


class TestCreateSnapshot:
    def test_request_opens_confirmation_with_destination(self, controller, btrfs):
        controller.request_create_snapshot()
        assert controller.dialog.kind is DialogKind.CONFIRM
        action = controller.dialog.pending
        assert action.kind is ActionKind.CREATE_SNAPSHOT
        assert action.source == str(ROOT / "_active/web-1")
        assert action.target == "/mnt/pool/_snapshots/web-20240102-030405"
        assert btrfs.called("create") == []

    def test_commit_creates_and_refreshes(self, controller, btrfs):
        controller.request_create_snapshot()
        controller.commit_dialog()
        assert btrfs.called("create") == [
            ("create", ROOT / "_active/web-1", Path("/mnt/pool/_snapshots/web-20240102-030405"))
        ]
        assert not controller.dialog.is_open
        assert controller.snapshots.items == [
            "_snapshots/web-20240101-000000",
            "_snapshots/web-20240102-030405",
        ]

    def test_failure_is_reported_in_dialog(self, controller, btrfs):
        btrfs.create_error = "Failed to create snapshot: ERROR: target path already exists"
        controller.request_create_snapshot()
        controller.commit_dialog()
        assert controller.dialog.kind is DialogKind.INFO
        assert "target path already exists" in controller.dialog.message

    def test_noop_without_volumes(self, controller, btrfs):
        btrfs.volumes = []
        controller.refresh()
        controller.request_create_snapshot()
        assert not controller.dialog.is_open

    def test_noop_while_dialog_open(self, controller):
        controller.request_balance()
        controller.request_create_snapshot()
        assert controller.dialog.pending.kind is ActionKind.BALANCE


class TestDeleteSnapshot:
    def test_cancel_never_deletes(self, controller, btrfs):
        controller.switch_focus_next()
        before = controller.snapshots.items
        controller.request_delete_snapshot()
        assert "_snapshots/web-20240101-000000" in controller.dialog.message
        controller.cancel_dialog()
        assert btrfs.called("delete") == []
        assert controller.snapshots.items == before
        assert controller.focus is Pane.SNAPSHOTS
        assert not controller.dialog.is_open

    def test_commit_deletes_and_refreshes(self, controller, btrfs):
        controller.switch_focus_next()
        controller.request_delete_snapshot()
        controller.commit_dialog()
        assert btrfs.called("delete") == [("delete", ROOT / "_snapshots/web-20240101-000000")]
        assert len(controller.snapshots) == 0
        assert controller.focus is Pane.SNAPSHOTS

    def test_failure_is_reported_in_dialog(self, controller, btrfs):
        btrfs.delete_error = "Failed to delete snapshot: ERROR: Could not destroy subvolume"
        controller.switch_focus_next()
        controller.request_delete_snapshot()
        controller.commit_dialog()
        assert controller.dialog.kind is DialogKind.INFO
        assert "Could not destroy subvolume" in controller.dialog.message
        controller.acknowledge_dialog()
        assert not controller.dialog.is_open

    def test_noop_without_snapshots(self, controller, btrfs):
        btrfs.snapshots = []
        controller.refresh()
        controller.switch_focus_next()
        controller.request_delete_snapshot()
        assert not controller.dialog.is_open


class TestBalanceAndGrub:
    def test_balance_needs_confirmation(self, controller, btrfs):
        controller.request_balance()
        assert btrfs.called("balance") == []
        controller.commit_dialog()
        assert btrfs.called("balance") == [("balance", ROOT)]
        assert controller.dialog.kind is DialogKind.INFO
        assert "relocate 2 out of 10 chunks" in controller.dialog.message

    def test_balance_error(self, controller, btrfs):
        btrfs.balance_error = "ERROR: error during balancing"
        controller.request_balance()
        controller.commit_dialog()
        assert controller.dialog.message.startswith("Error executing btrfs balance")

    def test_grub_runs_immediately(self, controller, system):
        controller.request_grub_update()
        assert system.grub_calls == 1
        assert controller.dialog.kind is DialogKind.INFO
        assert controller.dialog.message.startswith("GRUB successfully updated")

    def test_grub_error(self, controller, system):
        system.grub_error = "grub-mkconfig not found"
        controller.request_grub_update()
        assert controller.dialog.message == "Error updating GRUB:\ngrub-mkconfig not found"

    def test_busy_hook_runs_before_command(self, controller, system):
        seen: list[tuple[str, int]] = []
        controller.busy = lambda message: seen.append((message, system.grub_calls))
        controller.request_grub_update()
        assert seen == [("Updating GRUB configuration...", 0)]


class TestHotkeys:
    def test_volumes_legend(self, controller):
        assert legend_keys(controller) == ["q", "←/→", "↑/↓", "g", "b", "t"]

    def test_snapshots_legend(self, controller):
        controller.switch_focus_next()
        assert legend_keys(controller) == ["q", "←/→", "↑/↓", "g", "b", "r"]

    def test_no_navigation_or_remove_on_empty_list(self, controller, btrfs):
        btrfs.snapshots = []
        controller.refresh()
        controller.switch_focus_next()
        assert legend_keys(controller) == ["q", "←/→", "g", "b"]

    def test_no_create_for_ungroupable_volume(self, controller, btrfs):
        btrfs.volumes = ["_active"]
        controller.refresh()
        assert "t" not in legend_keys(controller)

    def test_dialog_legends(self, controller):
        controller.request_balance()
        assert controller.hotkey_legend_text() == "Enter: Execute | c/Esc: Cancel"
        controller.cancel_dialog()
        controller.request_grub_update()
        assert controller.hotkey_legend_text() == "Enter: Close"


class TestHandleKey:
    def test_quit(self, controller):
        assert controller.handle_key("q") == "quit"

    def test_quit_ignored_in_dialog(self, controller):
        controller.request_balance()
        assert controller.handle_key("q") is None
        assert controller.dialog.is_open

    def test_arrows(self, controller):
        controller.handle_key("KEY_DOWN")
        assert controller.volumes.selection == 1
        controller.handle_key("KEY_RIGHT")
        assert controller.focus is Pane.SNAPSHOTS
        controller.handle_key("KEY_LEFT")
        assert controller.focus is Pane.VOLUMES

    def test_create_only_from_volumes(self, controller):
        controller.handle_key("KEY_RIGHT")
        controller.handle_key("t")
        assert not controller.dialog.is_open
        controller.handle_key("r")
        assert controller.dialog.pending.kind is ActionKind.DELETE_SNAPSHOT

    def test_enter_commits_and_escape_cancels(self, controller, btrfs):
        controller.handle_key("t")
        controller.handle_key("KEY_ESCAPE")
        assert not controller.dialog.is_open
        assert btrfs.called("create") == []

        controller.handle_key("t")
        controller.handle_key("KEY_ENTER")
        assert len(btrfs.called("create")) == 1

    def test_other_keys_ignored_in_confirmation(self, controller):
        controller.handle_key("b")
        controller.handle_key("KEY_DOWN")
        controller.handle_key("g")
        assert controller.volumes.selection == 0
        assert controller.dialog.pending.kind is ActionKind.BALANCE

    def test_enter_acknowledges_info(self, controller):
        controller.handle_key("g")
        assert controller.dialog.kind is DialogKind.INFO
        controller.handle_key("c")
        assert controller.dialog.is_open
        controller.handle_key("\n")
        assert not controller.dialog.is_open
