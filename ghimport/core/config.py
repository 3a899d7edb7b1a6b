"""
Configuration management for the GitHub identity importer.

Provides centralized configuration with sensible defaults, loadable from
a JSON file and from environment variables (including a ``.env`` file).
"""

import os
import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv


@dataclass
class ImportConfig:
    """Settings shared by the validators and the importer."""

    # Directory holding the identity key pairs and metadata files
    ssh_dir: str = field(default_factory=lambda: str(Path.home() / ".ssh"))

    # Git executable or alias used for every invocation
    git_path: str = "git"

    # Timeout for git operations in seconds (None = wait indefinitely)
    git_timeout: Optional[int] = None

    # Suffix appended to an existing destination while the clone is made
    backup_suffix: str = "-tmpbkup"

    # File names used by SSH itself, never accepted as identity names
    restricted_identity_names: List[str] = field(default_factory=lambda: [
        "id_rsa", "id_ecdsa", "id_ed25519", "authorized_keys",
        "known_hosts", "config", "ssh-keygen",
    ])

    # Enable verbose logging
    verbose: bool = False


class Config:
    """
    Central configuration manager providing access to all settings.

    Supports loading from environment variables and configuration files.
    """

    _instance: Optional["Config"] = None
    _config: ImportConfig = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._config = ImportConfig()
        return cls._instance

    @classmethod
    def get(cls) -> ImportConfig:
        """Get the current configuration."""
        if cls._instance is None:
            cls()
        return cls._instance._config

    @classmethod
    def reset(cls) -> ImportConfig:
        """Discard any loaded settings and return a fresh default configuration."""
        instance = cls()
        instance._config = ImportConfig()
        return instance._config

    @classmethod
    def load_from_file(cls, config_path: str) -> ImportConfig:
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the configuration file.

        Returns:
            Loaded ImportConfig instance.
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "r") as f:
            data = json.load(f)

        instance = cls()
        instance._config = cls._dict_to_config(data)
        return instance._config

    @classmethod
    def load_from_env(cls) -> ImportConfig:
        """
        Load configuration from environment variables.

        Variables are prefixed with GHIMPORT_. A ``.env`` file in the working
        directory is read first; variables already set in the environment win.

        Returns:
            ImportConfig with environment overrides applied.
        """
        load_dotenv(find_dotenv(usecwd=True))

        instance = cls()
        config = instance._config

        if os.getenv("GHIMPORT_SSH_DIR"):
            config.ssh_dir = os.path.expanduser(os.getenv("GHIMPORT_SSH_DIR"))

        if os.getenv("GHIMPORT_GIT_PATH"):
            config.git_path = os.getenv("GHIMPORT_GIT_PATH")

        if os.getenv("GHIMPORT_GIT_TIMEOUT"):
            config.git_timeout = int(os.getenv("GHIMPORT_GIT_TIMEOUT"))

        if os.getenv("GHIMPORT_VERBOSE"):
            config.verbose = os.getenv("GHIMPORT_VERBOSE").lower() in ("true", "1", "yes")

        return config

    @staticmethod
    def _dict_to_config(data: dict) -> ImportConfig:
        """Convert a dictionary to ImportConfig, ignoring unknown keys."""
        known = {f.name for f in fields(ImportConfig)}
        config = ImportConfig(**{k: v for k, v in data.items() if k in known})
        config.ssh_dir = os.path.expanduser(config.ssh_dir)
        return config
