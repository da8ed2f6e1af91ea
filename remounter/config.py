from pathlib import Path
from typing import List, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Fixed behaviour, not exposed as settings
SMB_PORT = 445
PROBE_TIMEOUT_SECONDS = 5.0
POLL_INTERVAL_SECONDS = 1.0


class Settings(BaseSettings):
    # Remote host and shares
    host: str
    smb_shares: str  # Comma-separated share paths, e.g. "/Volumes/media,/Volumes/backup"
    post_mount_script: Optional[str] = None

    # Logging konfiguration
    log_level: str = "INFO"
    log_file_path: str = ""  # Empty means console only
    log_retention_days: int = 30

    model_config = SettingsConfigDict(
        env_prefix="REMOUNTER_",
        env_file="settings.env",
        extra="ignore",
    )

    @field_validator("host")
    @classmethod
    def _host_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("host must not be empty")
        return value

    @field_validator("smb_shares")
    @classmethod
    def _shares_not_blank(cls, value: str) -> str:
        if not any(part.strip() for part in value.split(",")):
            raise ValueError("at least one SMB share path is required")
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()

    @property
    def share_paths(self) -> List[Path]:
        """Parsed share paths, in the order given."""
        return [Path(part.strip()) for part in self.smb_shares.split(",") if part.strip()]

    @property
    def log_directory(self) -> Optional[Path]:
        """Log directory as a Path, or None when file logging is off"""
        if not self.log_file_path:
            return None
        return Path(self.log_file_path).parent
