"""macOS Network Mounter."""

from pathlib import Path
from typing import Sequence

from .base_mounter import BaseMounter


class MacOSMounter(BaseMounter):
    """Mounts SMB shares through Finder using osascript."""

    def build_mount_command(self, server: str, share_path: Path) -> Sequence[str]:
        share_url = f"smb://{server}{share_path}"
        return ["osascript", "-e", f'mount volume "{share_url}"']

    def get_platform_name(self) -> str:
        return "macOS"
