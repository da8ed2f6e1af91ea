"""Linux Network Mounter."""

from pathlib import Path
from typing import Sequence

from .base_mounter import BaseMounter


class LinuxMounter(BaseMounter):
    """
    Mounts a share through its fstab entry.

    The server is not passed to mount(8): the entry for share_path in
    /etc/fstab already names the remote source and its options.
    """

    def build_mount_command(self, server: str, share_path: Path) -> Sequence[str]:
        return ["mount", str(share_path)]

    def get_platform_name(self) -> str:
        return "Linux"
