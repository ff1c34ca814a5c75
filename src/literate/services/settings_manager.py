"""Settings Manager - Reads application configuration from .env."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from literate.services.cover_resolver import DEFAULT_COVERS_DIR

_FALSE_VALUES = {"0", "false", "no", "off"}


class SettingsManager:
    """
    Manages application settings.

    Values come from the process environment, populated from the .env file
    in the project root.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_assets_dir(self) -> Path:
        """Directory holding cover images."""
        value = os.getenv("LITERATE_ASSETS_DIR")
        if value and value.strip():
            return Path(value.strip()).expanduser()
        return DEFAULT_COVERS_DIR

    def get_log_level(self) -> str:
        value = os.getenv("LITERATE_LOG_LEVEL")
        return value.strip().upper() if value and value.strip() else "WARNING"

    def should_seed_samples(self) -> bool:
        """Whether to start with the sample catalog."""
        value = os.getenv("LITERATE_SEED_SAMPLES")
        if value is None or not value.strip():
            return True
        return value.strip().lower() not in _FALSE_VALUES

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)
