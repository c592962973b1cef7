"""Configuration and constants for Snapshot Manager."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

# Subvolume naming
DEFAULT_SUBVOLUME_PREFIX: str = "_active"
DEFAULT_SNAPSHOT_PREFIX: str = "_snapshots"
SUBVOLUME_PREFIX_ENV: str = "SUBVOLUME_PREFIX"
SNAPSHOT_PREFIX_ENV: str = "SNAPSHOT_PREFIX"
TIMESTAMP_FORMAT: str = "%Y%m%d-%H%M%S"

# External tools
BTRFS_BIN: str = "btrfs"
BALANCE_USAGE_FILTER: int = 15
GRUB_MKCONFIG_BIN: str = "grub-mkconfig"
GRUB_CONFIG_PATH: Path = Path("/boot/grub/grub.cfg")

# UI settings
INPUT_TIMEOUT: float = 0.5
DIALOG_WIDTH: int = 60
DIALOG_HEIGHT: int = 10

# Color scheme
COLORS: dict[str, str] = {
    "frame": "white",
    "focused": "bold_green",
    "error": "red",
    "info": "cyan",
    "hotkey": "yellow",
}

# Key bindings
KEYBINDINGS: dict[str, str] = {
    "quit": "q",
    "create": "t",
    "remove": "r",
    "grub": "g",
    "balance": "b",
    "cancel": "c",
    "up": "KEY_UP",
    "down": "KEY_DOWN",
    "left": "KEY_LEFT",
    "right": "KEY_RIGHT",
    "enter": "KEY_ENTER",
    "escape": "KEY_ESCAPE",
}


@dataclass(frozen=True)
class Config:
    """Startup configuration, built once and shared read-only."""

    root_path: Path
    subvolume_prefix: str = DEFAULT_SUBVOLUME_PREFIX
    snapshot_prefix: str = DEFAULT_SNAPSHOT_PREFIX

    @classmethod
    def from_env(
        cls, root_path: Path | str, environ: Mapping[str, str] | None = None
    ) -> "Config":
        """Build config, letting the environment override the name prefixes."""
        env = os.environ if environ is None else environ
        return cls(
            root_path=Path(root_path),
            subvolume_prefix=env.get(SUBVOLUME_PREFIX_ENV) or DEFAULT_SUBVOLUME_PREFIX,
            snapshot_prefix=env.get(SNAPSHOT_PREFIX_ENV) or DEFAULT_SNAPSHOT_PREFIX,
        )

    def full_path(self, entry: str) -> Path:
        """Absolute path of a subvolume listed relative to the root."""
        return self.root_path / entry
