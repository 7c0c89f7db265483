"""
Configuration Management for sacn-stream.

Uses Pydantic Settings for type-safe configuration with environment
variable support and YAML file loading.
"""

from __future__ import annotations

import uuid
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsError

from sacn_stream.core.exceptions import ConfigError
from sacn_stream.e131.constants import DEFAULT_PRIORITY, SACN_PORT
from sacn_stream.e131.options import FramingOptions


class SenderConfig(BaseModel):
    """Per-source identity and framing defaults."""
    source_name: Optional[str] = None  # None = local device name
    universe: int = Field(default=1, ge=0, le=0xFFFF)
    priority: int = Field(default=DEFAULT_PRIORITY, ge=0, le=0xFF)
    sync_universe: int = Field(default=0, ge=0, le=0xFFFF)
    preview_data: bool = False
    stream_terminated: bool = False
    force_synchronization: bool = False
    cid: Optional[uuid.UUID] = None  # None = random per sender

    def options(self) -> FramingOptions:
        """Fold the option booleans into a framing options bitmask."""
        options = FramingOptions.NONE
        if self.preview_data:
            options |= FramingOptions.PREVIEW_DATA
        if self.stream_terminated:
            options |= FramingOptions.STREAM_TERMINATED
        if self.force_synchronization:
            options |= FramingOptions.FORCE_SYNCHRONIZATION
        return options

    def resolved_source_name(self) -> str:
        from sacn_stream.device import get_device_name

        return self.source_name if self.source_name is not None else get_device_name()


class TransportConfig(BaseModel):
    """UDP transport configuration."""
    unicast_host: Optional[str] = None  # None = universe multicast group
    port: int = Field(default=SACN_PORT, ge=1, le=0xFFFF)
    multicast_ttl: int = Field(default=1, ge=0, le=255)
    bind_interface: Optional[str] = None  # IPv4 address of the outgoing interface


class Settings(BaseSettings):
    """
    Main application settings.

    Can be configured via:
    - Environment variables (prefixed with SACN_)
    - YAML config file
    - Direct instantiation
    """

    sender: SenderConfig = Field(default_factory=SenderConfig)
    transport: TransportConfig = Field(default_factory=TransportConfig)

    # Debug
    debug: bool = False
    log_level: str = "INFO"

    class Config:
        env_prefix = "SACN_"
        env_nested_delimiter = "__"

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from defaults and SACN_ environment variables."""
        try:
            return cls()
        except (ValidationError, SettingsError) as e:
            raise ConfigError(str(e)) from e

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from a YAML file."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"invalid YAML: {e}", path=str(path)) from e
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError("top level must be a mapping", path=str(path))
        try:
            return cls(**data)
        except (ValidationError, SettingsError) as e:
            raise ConfigError(str(e), path=str(path)) from e

    def to_yaml(self, path: Path) -> None:
        """Save settings to a YAML file."""
        with open(path, "w") as f:
            yaml.dump(self.model_dump(mode="json"), f, default_flow_style=False)
