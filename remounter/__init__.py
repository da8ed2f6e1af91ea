"""Remount SMB shares when their server becomes reachable again."""

__version__ = "0.1.0"
