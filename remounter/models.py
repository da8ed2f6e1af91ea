from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class ConnectionState(str, Enum):
    """Reachability of the remote SMB port as seen by the last poll"""

    UP = "UP"
    DOWN = "DOWN"


class Transition(str, Enum):
    """Edge between two consecutive polls"""

    UP = "UP"  # Down -> Up, triggers a remount pass
    DOWN = "DOWN"  # Up -> Down, re-arms for the next Up edge


class RemountStatus(str, Enum):
    """Result of a single share remount attempt"""

    SKIPPED = "SKIPPED"  # Local path already exists, mount not attempted
    SUCCEEDED = "SUCCEEDED"  # Mount command exited 0
    FAILED = "FAILED"  # Mount command exited non-zero


class Endpoint(BaseModel):
    """Resolved network address and port of the file-sharing service."""

    model_config = ConfigDict(frozen=True)

    address: str
    port: int
    flowinfo: int = 0
    scope_id: int = 0  # IPv6 interface index, needed for link-local addresses

    @property
    def host(self) -> str:
        """Address to connect to, with the %scope suffix for scoped IPv6 addresses"""
        if self.scope_id:
            return f"{self.address}%{self.scope_id}"
        return self.address

    def __str__(self) -> str:
        return f"{self.host}:{self.port}"


class Target(BaseModel):
    """
    Hostname together with its endpoint, resolved once at startup.

    The endpoint is never refreshed, so a DNS change while the daemon runs
    is not picked up.
    """

    model_config = ConfigDict(frozen=True)

    hostname: str
    endpoint: Endpoint

    def __str__(self) -> str:
        return f"{self.hostname}:{self.endpoint.port}"


class ShareSpec(BaseModel):
    """Ordered mount points to restore on one remote host."""

    model_config = ConfigDict(frozen=True)

    host: str
    paths: Tuple[Path, ...] = Field(default_factory=tuple)

    def remote_url(self, path: Path) -> str:
        """SMB url for a share, e.g. smb://nas/Volumes/media"""
        return f"smb://{self.host}{path}"


class RemountOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: Path
    status: RemountStatus
    reason: Optional[str] = None

    @property
    def is_failure(self) -> bool:
        return self.status == RemountStatus.FAILED


class RemountPassResult(BaseModel):
    """Outcomes of one remount pass, one entry per configured share, in order."""

    outcomes: List[RemountOutcome] = Field(default_factory=list)

    @property
    def failures(self) -> List[RemountOutcome]:
        return [outcome for outcome in self.outcomes if outcome.is_failure]

    @property
    def succeeded(self) -> bool:
        return not self.failures


class MountCommandResult(BaseModel):
    """Exit status of one external mount invocation."""

    returncode: int
    stderr: str = ""

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0
