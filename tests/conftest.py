"""Shared test fixtures."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from snapshot_manager.config import Config
from snapshot_manager.controller import ViewController
from snapshot_manager.services import CommandError

ROOT = Path("/mnt/pool")


class FakeBtrfs:
    """In-memory stand-in for BtrfsService."""

    def __init__(self, volumes: list[str], snapshots: list[str]) -> None:
        self.volumes = list(volumes)
        self.snapshots = list(snapshots)
        self.calls: list[tuple] = []
        self.list_error: str | None = None
        self.metadata_error: str | None = None
        self.create_error: str | None = None
        self.delete_error: str | None = None
        self.balance_error: str | None = None

    def list_entries(self, root: Path) -> tuple[list[str], list[str]]:
        self.calls.append(("list", root))
        if self.list_error:
            raise CommandError(self.list_error)
        return list(self.volumes), list(self.snapshots)

    def entry_metadata(self, path: Path) -> str:
        self.calls.append(("show", path))
        if self.metadata_error:
            raise CommandError(self.metadata_error)
        return f"Name: {path.name}"

    def create_snapshot(self, source: Path, dest: Path) -> None:
        self.calls.append(("create", source, dest))
        if self.create_error:
            raise CommandError(self.create_error)
        self.snapshots.append(str(dest.relative_to(ROOT)))

    def delete_snapshot(self, path: Path) -> None:
        self.calls.append(("delete", path))
        if self.delete_error:
            raise CommandError(self.delete_error)
        self.snapshots.remove(str(path.relative_to(ROOT)))

    def balance(self, root: Path) -> str:
        self.calls.append(("balance", root))
        if self.balance_error:
            raise CommandError(self.balance_error)
        return "Done, had to relocate 2 out of 10 chunks"

    def called(self, name: str) -> list[tuple]:
        return [call for call in self.calls if call[0] == name]


class FakeSystem:
    """In-memory stand-in for SystemService."""

    def __init__(self) -> None:
        self.disk_error: str | None = None
        self.grub_error: str | None = None
        self.grub_calls = 0

    def disk_usage(self, root: Path) -> str:
        if self.disk_error:
            raise CommandError(self.disk_error)
        return "FS: /dev/sda2  Size: 100G  Used: 40G (40%)  Avail: 60G"

    def regenerate_boot_config(self) -> str:
        self.grub_calls += 1
        if self.grub_error:
            raise CommandError(self.grub_error)
        return "Generating grub configuration file ...\ndone"


VOLUMES = ["_active/web-1", "_active/db-1"]
SNAPSHOTS = ["_snapshots/web-20240101-000000", "_snapshots/db-20240101-000000"]


@pytest.fixture
def config() -> Config:
    return Config(root_path=ROOT)


@pytest.fixture
def btrfs() -> FakeBtrfs:
    return FakeBtrfs(VOLUMES, SNAPSHOTS)


@pytest.fixture
def system() -> FakeSystem:
    return FakeSystem()


@pytest.fixture
def controller(config, btrfs, system) -> ViewController:
    ctl = ViewController(
        config,
        btrfs,
        system,
        clock=lambda: datetime(2024, 1, 2, 3, 4, 5),
    )
    ctl.refresh()
    return ctl
