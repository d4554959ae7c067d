"""
Configuration management for rustgate.
Loads settings from environment variables with sensible defaults.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from .constants import DEFAULT_ATTRIBUTE_NAMESPACE, DEFAULT_RUSTC


@dataclass
class ToolchainConfig:
    """
    Compiler toolchain configuration.

    The compiler is queried once per run with `<rustc> --version`. Cargo
    exports RUSTC to build scripts, so the same variable is honoured here.
    """
    rustc: str = DEFAULT_RUSTC


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = "WARNING"
    log_dir: str = ""   # Empty = console only


@dataclass
class ExpandConfig:
    """Source expansion configuration."""
    # Attribute path prefix, e.g. #[rustversion::since(1.31)]
    namespace: str = DEFAULT_ATTRIBUTE_NAMESPACE


class Config:
    """
    Central configuration manager.

    Loads configuration from environment variables (optionally seeded from
    .env files) and provides typed access to all settings.
    """

    _instance: Optional['Config'] = None

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, env_file: str = ".env"):
        if self._initialized:
            return

        # Priority: process environment > env_file > rustgate.env
        # (override=False: the first value seen for a variable is kept)
        for env_name in [env_file, "rustgate.env"]:
            env_path = Path(env_name)
            if env_path.exists():
                load_dotenv(env_path, override=False)

        self.toolchain = self._load_toolchain_config()
        self.log = self._load_log_config()
        self.expand = self._load_expand_config()

        self._initialized = True

    def _load_toolchain_config(self) -> ToolchainConfig:
        """Load toolchain configuration from environment."""
        rustc = os.getenv("RUSTC", "").strip()
        return ToolchainConfig(rustc=rustc or DEFAULT_RUSTC)

    def _load_log_config(self) -> LogConfig:
        """Load logging configuration from environment."""
        return LogConfig(
            level=os.getenv("RUSTGATE_LOG_LEVEL", "WARNING"),
            log_dir=os.getenv("RUSTGATE_LOG_DIR", ""),
        )

    def _load_expand_config(self) -> ExpandConfig:
        """Load source expansion configuration from environment."""
        namespace = os.getenv("RUSTGATE_ATTR_NAMESPACE", "").strip()
        return ExpandConfig(namespace=namespace or DEFAULT_ATTRIBUTE_NAMESPACE)

    @classmethod
    def reset(cls) -> None:
        """Drop the singleton so the next get_config() re-reads the environment."""
        cls._instance = None

    def reload(self, env_file: str = ".env") -> 'Config':
        """Reload configuration from environment."""
        self._initialized = False
        Config._instance = None
        return Config(env_file)

    def validate(self) -> tuple[bool, List[str]]:
        """
        Validate configuration.

        Returns:
            Tuple of (is_valid, list of error messages)
        """
        errors = []
        if self.log.level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"RUSTGATE_LOG_LEVEL has unknown level '{self.log.level}'")
        if not self.expand.namespace.isidentifier():
            errors.append(
                f"RUSTGATE_ATTR_NAMESPACE must be a plain identifier, got '{self.expand.namespace}'"
            )
        return len(errors) == 0, errors


def get_config(env_file: str = ".env") -> Config:
    """Get or create the global config instance."""
    return Config(env_file)
