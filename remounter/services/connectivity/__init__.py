"""
Connectivity Module

Components:
- TargetResolver: One-time hostname resolution
- ReachabilityProbe: TCP connect check with timeout
- ConnectionStateTracker: Up/Down latch and edge detection
- ConnectivityMonitor: Poll loop that drives remounting
"""

from .connection_state import ConnectionStateTracker
from .connectivity_monitor import ConnectivityMonitor
from .reachability_probe import ReachabilityProbe
from .target_resolver import TargetResolver

__all__ = [
    "ConnectionStateTracker",
    "ConnectivityMonitor",
    "ReachabilityProbe",
    "TargetResolver",
]
