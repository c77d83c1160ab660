"""Application settings configuration.

Settings are read from a YAML file and validated with pydantic. A missing,
empty, unparsable or invalid file yields the defaults.
"""

import logging
from pathlib import Path
from typing import Literal, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger("PagedList.Settings")


class LoaderSettings(BaseModel):
    """Retry gating of the list store"""

    model_config = ConfigDict(frozen=True)

    retry_delay_seconds: int = Field(
        default=5,
        ge=0,
        le=300,
        description="Countdown before retry is enabled after a failure",
    )
    refresh_delay_seconds: int = Field(
        default=3,
        ge=0,
        le=300,
        description="Countdown before refresh is enabled on the empty state",
    )
    backoff_factor: float = Field(
        default=1.0,
        ge=1.0,
        le=10.0,
        description="Retry delay growth per consecutive failure (1 = fixed)",
    )
    max_retry_delay_seconds: int = Field(
        default=60,
        ge=1,
        le=3600,
        description="Upper bound for the retry delay",
    )


class SourceSettings(BaseModel):
    """Remote source selection"""

    model_config = ConfigDict(frozen=True)

    transport: Literal["demo", "ipc", "websocket"] = "demo"
    socket_path: Optional[str] = None
    uri: str = "ws://localhost:8765"
    max_size: int = Field(default=2**20, ge=1024)
    timeout_seconds: float = Field(default=10.0, gt=0)
    demo_page_size: int = Field(default=20, ge=1, le=100)
    demo_total_records: int = Field(default=100, ge=0)
    demo_failure_rate: float = Field(default=0.2, ge=0.0, le=1.0)
    demo_duplicate_rate: float = Field(default=0.1, ge=0.0, le=1.0)
    demo_latency_seconds: float = Field(default=0.5, ge=0.0)
    demo_seed: Optional[int] = None


class WindowSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    default_width: int = Field(default=400, ge=200)
    default_height: int = Field(default=700, ge=200)
    row_height: int = Field(default=50, ge=20)


class AppSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    loader: LoaderSettings = Field(default_factory=LoaderSettings)
    source: SourceSettings = Field(default_factory=SourceSettings)
    window: WindowSettings = Field(default_factory=WindowSettings)

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> "AppSettings":
        if path is None:
            path = "settings.yml"

        config = cls._load_yaml(Path(path))
        try:
            settings = cls(**config)
        except ValidationError as e:
            logger.warning(f"Invalid settings in {path}, using defaults: {e}")
            return cls()

        logger.info(f"Loaded settings from {path}")
        return settings

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        try:
            with open(path, "r") as f:
                config = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.debug(f"Settings file not found at {path}, using defaults")
            return {}
        except yaml.YAMLError as e:
            logger.warning(f"Error parsing settings YAML: {e}")
            return {}

        if not isinstance(config, dict):
            logger.warning(f"Settings file {path} is not a mapping, ignoring it")
            return {}
        return config
