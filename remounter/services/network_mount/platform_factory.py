"""Platform Factory - platform detection and mounter creation."""

import logging
import platform

from .base_mounter import BaseMounter


class UnsupportedPlatformError(Exception):
    """Raised when platform is not supported for network mounting."""
    pass


class PlatformFactory:
    """Factory for creating platform-specific mount implementations."""

    def detect_platform(self) -> str:
        """Detect current platform. Returns: macos or linux."""
        system = platform.system().lower()

        if system == "darwin":
            return "macos"
        elif system == "linux":
            return "linux"
        else:
            raise UnsupportedPlatformError(f"Platform {system} not supported for network mounting")

    def create_mounter(self) -> BaseMounter:
        """Create platform-specific mounter instance."""
        platform_name = self.detect_platform()

        if platform_name == "macos":
            from .macos_mounter import MacOSMounter
            mounter = MacOSMounter()
        else:
            from .linux_mounter import LinuxMounter
            mounter = LinuxMounter()

        logging.info(f"Initialized {mounter.get_platform_name()} mounter")
        return mounter
