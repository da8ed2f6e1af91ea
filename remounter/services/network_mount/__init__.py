"""
Network Mount Module

Platform-specific implementations of the single-share mount operation.

Components:
- BaseMounter: Abstract base class, runs the mount command
- MacOSMounter: osascript "mount volume" implementation
- LinuxMounter: fstab-driven mount(8) implementation
- PlatformFactory: Platform detection and factory
"""

from .base_mounter import BaseMounter
from .linux_mounter import LinuxMounter
from .macos_mounter import MacOSMounter
from .platform_factory import PlatformFactory, UnsupportedPlatformError

__all__ = [
    "BaseMounter",
    "LinuxMounter",
    "MacOSMounter",
    "PlatformFactory",
    "UnsupportedPlatformError",
]
