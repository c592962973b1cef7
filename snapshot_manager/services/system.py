"""Host tools: disk usage and bootloader configuration."""

from pathlib import Path

from snapshot_manager.config import GRUB_CONFIG_PATH, GRUB_MKCONFIG_BIN, Config
from snapshot_manager.services.command import run_command


class SystemService:
    """Service for disk usage and GRUB configuration."""

    def __init__(self, config: Config, grub_config: Path = GRUB_CONFIG_PATH) -> None:
        self.config = config
        self.grub_config = grub_config

    def disk_usage(self, root: Path) -> str:
        """One-line summary of the filesystem holding root."""
        output = run_command(["df", "-h", str(root)])

        # Skip header
        lines = output.splitlines()
        if len(lines) < 2:
            return ""

        # Filesystem Size Used Avail Use% Mounted on
        fields = lines[1].split()
        if len(fields) < 6:
            return ""

        return (
            f"FS: {fields[0]}  Size: {fields[1]}  "
            f"Used: {fields[2]} ({fields[4]})  Avail: {fields[3]}"
        )

    def regenerate_boot_config(self) -> str:
        """Rewrite the GRUB config so new snapshots show up. Returns tool output."""
        return run_command(
            [GRUB_MKCONFIG_BIN, "-o", str(self.grub_config)], combined=True
        )
