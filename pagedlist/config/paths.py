"""Application paths configuration."""

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class AppPaths:
    config_path: Path
    socket_path: Path

    @classmethod
    def default(cls) -> "AppPaths":
        runtime_dir = Path(os.environ.get("XDG_RUNTIME_DIR", "/tmp"))
        config_home = Path(
            os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
        )

        return cls(
            config_path=config_home / "pagedlist" / "settings.yml",
            socket_path=runtime_dir / "pagedlist-ipc.sock",
        )
