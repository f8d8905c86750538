"""Configuration management for courtdesk."""

import os
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import toml
from pydantic import BaseModel, ConfigDict, Field

from courtdesk.core.api import DEFAULT_TIMEOUT

ENV_REMOTE = "env"


class RemoteConfig(BaseModel):
    """Connection details for one booking API."""

    url: str = Field(description="Base URL of the booking API")
    token: str = Field(description="Operator bearer token")


class ClientConfig(BaseModel):
    """Configuration stored in ~/.courtdesk/config.toml."""

    model_config = ConfigDict(
        extra="allow"
    )  # Allow additional fields for extensibility

    active_remote: Optional[str] = Field(
        default=None, description="Currently active remote alias"
    )
    remotes: Dict[str, RemoteConfig] = Field(
        default_factory=dict, description="Remote configurations by alias"
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT, gt=0, description="Request timeout in seconds"
    )

    @property
    def active(self) -> Optional[RemoteConfig]:
        """The active remote, if one is set and configured."""
        if self.active_remote is None:
            return None
        return self.remotes.get(self.active_remote)


class Config:
    """Manages courtdesk client configuration."""

    def __init__(self, config_dir: Optional[Path] = None):
        """Initialize config manager.

        Args:
            config_dir: Directory holding config.toml. If None, uses
                COURTDESK_CONFIG_DIR or ~/.courtdesk.
        """
        if config_dir is None:
            env_dir = os.environ.get("COURTDESK_CONFIG_DIR")
            config_dir = Path(env_dir) if env_dir else Path.home() / ".courtdesk"

        self.config_dir = Path(config_dir)
        self.config_path = self.config_dir / "config.toml"
        self._config: Optional[ClientConfig] = None
        # key -> (value read from disk, value injected from the environment)
        self._env_applied: Dict[str, Tuple[Any, Any]] = {}

    @property
    def exists(self) -> bool:
        """Check if config file exists."""
        return self.config_path.exists()

    def load(self) -> ClientConfig:
        """Load configuration from disk, with environment variable overrides."""
        if not self.exists:
            raise FileNotFoundError(f"Config file not found at {self.config_path}")

        with open(self.config_path, "r") as f:
            data = toml.load(f)

        self._apply_env_overrides(data)

        self._config = ClientConfig(**data)
        return self._config

    def load_or_default(self) -> ClientConfig:
        """Load configuration, starting from defaults when no file exists yet."""
        if self.exists:
            return self.load()

        data: Dict[str, Any] = {}
        self._apply_env_overrides(data)
        self._config = ClientConfig(**data)
        return self._config

    def _apply_env_overrides(self, data: Dict[str, Any]) -> None:
        """Apply environment variable overrides to configuration data."""
        self._env_applied = {}
        env_url = os.environ.get("COURTDESK_API_URL")
        env_token = os.environ.get("COURTDESK_API_TOKEN")

        if env_url and env_token:
            remotes = data.setdefault("remotes", {})
            env_remote = {"url": env_url.rstrip("/"), "token": env_token}
            self._env_applied["remote"] = (remotes.get(ENV_REMOTE), env_remote)
            remotes[ENV_REMOTE] = env_remote

            # Make it active if no other remote is set
            if not data.get("active_remote"):
                data["active_remote"] = ENV_REMOTE

        if env_timeout := os.environ.get("COURTDESK_TIMEOUT"):
            self._env_applied["timeout"] = (data.get("timeout"), float(env_timeout))
            data["timeout"] = float(env_timeout)

    def _strip_env_overrides(self, data: Dict[str, Any]) -> None:
        """Put back on-disk values that an unchanged env override replaced.

        Environment settings (the operator token in particular) are never
        written to config.toml.
        """
        if "remote" in self._env_applied:
            on_disk, injected = self._env_applied["remote"]
            remotes = data.get("remotes", {})
            if remotes.get(ENV_REMOTE) == injected:
                if on_disk is None:
                    del remotes[ENV_REMOTE]
                else:
                    remotes[ENV_REMOTE] = on_disk
            if data.get("active_remote") == ENV_REMOTE and ENV_REMOTE not in remotes:
                del data["active_remote"]

        if "timeout" in self._env_applied:
            on_disk, injected = self._env_applied["timeout"]
            if data.get("timeout") == injected:
                if on_disk is None:
                    del data["timeout"]
                else:
                    data["timeout"] = on_disk

    def save(self, config: Optional[ClientConfig] = None) -> None:
        """Save configuration to disk, leaving out environment overrides.

        Args:
            config: Configuration to save. If None, saves current config.
        """
        if config:
            self._config = config

        if not self._config:
            raise ValueError("No configuration to save")

        self.config_dir.mkdir(parents=True, exist_ok=True)

        config_dict = self._config.model_dump(exclude_none=True)
        self._strip_env_overrides(config_dict)

        with open(self.config_path, "w") as f:
            toml.dump(config_dict, f)
