"""Application settings using Pydantic Settings."""

import sys
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_open_command() -> str:
    if sys.platform == "darwin":
        return "/usr/bin/open"
    return "xdg-open"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MAGIC_OPENER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    # Logging
    log_level: str = "WARNING"
    json_logs: bool = False

    # Git
    git_binary: str = "git"
    remote_name: str = "origin"
    fallback_branch: str = "main"
    default_branches: list[str] = Field(
        default_factory=lambda: ["develop", "main", "master"]
    )

    # Opener
    open_command: str = Field(default_factory=_default_open_command)

    # SSH sessions: forwarded over the tunnel instead of opened locally
    forward_host: str = "localhost"
    forward_port: int = 2226
    mounts_prefix: str = "/bits"
    ssh_tty: str | None = Field(default=None, validation_alias="SSH_TTY")
    ssh_client_home: str | None = Field(default=None, validation_alias="SSH_CLIENT_HOME")

    @property
    def in_ssh_session(self) -> bool:
        return bool(self.ssh_tty)

    @property
    def opener_is_macos_open(self) -> bool:
        return self.open_command.rsplit("/", 1)[-1] == "open"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
