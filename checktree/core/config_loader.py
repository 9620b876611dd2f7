# Path: checktree/core/config_loader.py
"""
Configuration Loader for Checktree Module

Loads configuration from .env file for the checktree system.
Singleton pattern ensures consistent configuration across all components.

Nothing here is required: every key has a default, so the library works
without a .env file.
"""

import os
from typing import Optional
from pathlib import Path
from dotenv import load_dotenv

from ..constants import (
    CHECKED_STRATEGIES,
    DEFAULT_LABEL_PROP,
    DUPLICATE_KEY_OVERWRITE,
    DUPLICATE_KEY_POLICIES,
    SHOW_CHILD,
)


# ==============================================================================
# DEFAULT CONFIGURATION VALUES
# ==============================================================================

DEFAULT_LOG_LEVEL: str = 'INFO'


class ConfigLoader:
    """
    Singleton configuration loader for checktree module.

    Loads configuration from environment variables with validation,
    type conversion, and sensible defaults.

    Example:
        config = ConfigLoader()
        strategy = config.get('show_checked_strategy')  # 'SHOW_CHILD'
        policy = config['duplicate_key_policy']         # 'overwrite'
    """

    _instance: Optional['ConfigLoader'] = None
    _initialized: bool = False

    def __new__(cls) -> 'ConfigLoader':
        """Ensure only one instance exists (singleton pattern)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """
        Initialize configuration loader.

        Only runs once due to singleton pattern. Loads .env file
        and validates all configuration on first instantiation.
        """
        if ConfigLoader._initialized:
            return

        # checktree/core/config_loader.py -> project root is 3 levels up
        current_file = Path(__file__).resolve()
        project_root = current_file.parent.parent.parent
        env_path = project_root / '.env'

        if env_path.exists():
            load_dotenv(dotenv_path=env_path, interpolate=True)

        self._config = self._load_configuration()
        ConfigLoader._initialized = True

    def _load_configuration(self) -> dict[str, any]:
        """
        Load and validate all configuration from environment.

        Returns:
            Dictionary of validated configuration values with proper types

        Raises:
            ValueError: If a choice-valued setting holds an unknown value
        """
        config = {
            # ================================================================
            # DEBUG
            # ================================================================
            'debug': self._get_bool('CHECKTREE_DEBUG', False),

            # ================================================================
            # LOGGING CONFIGURATION
            # ================================================================
            'log_dir': self._get_path('CHECKTREE_LOG_DIR'),
            'log_level': self._get_env('CHECKTREE_LOG_LEVEL', DEFAULT_LOG_LEVEL),
            'console_logging': self._get_bool('CHECKTREE_CONSOLE_LOGGING', True),

            # ================================================================
            # SELECTION DEFAULTS
            # ================================================================
            'label_prop': self._get_env('CHECKTREE_LABEL_PROP', DEFAULT_LABEL_PROP),
            'show_checked_strategy': self._get_choice(
                'CHECKTREE_SHOW_CHECKED_STRATEGY', SHOW_CHILD, CHECKED_STRATEGIES
            ),

            # ================================================================
            # INDEXING
            # ================================================================
            'duplicate_key_policy': self._get_choice(
                'CHECKTREE_DUPLICATE_KEY_POLICY',
                DUPLICATE_KEY_OVERWRITE,
                DUPLICATE_KEY_POLICIES,
            ),
        }

        return config

    def _get_env(
        self,
        key: str,
        default: Optional[str] = None,
        required: bool = False
    ) -> Optional[str]:
        """Get string environment variable."""
        value = os.getenv(key)

        if value is None:
            if required:
                raise ValueError(f"Required environment variable '{key}' is not set")
            return default

        return value.strip()

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean environment variable."""
        value = os.getenv(key)
        if value is None:
            return default

        return value.strip().lower() in ('true', '1', 'yes', 'on')

    def _get_path(self, key: str, required: bool = False) -> Optional[Path]:
        """Get path environment variable."""
        value = os.getenv(key)

        if value is None or not value.strip():
            if required:
                raise ValueError(f"Required environment variable '{key}' is not set")
            return None

        return Path(value.strip())

    def _get_choice(self, key: str, default: str, choices: list[str]) -> str:
        """Get environment variable restricted to a set of choices."""
        value = self._get_env(key, default)
        if value not in choices:
            raise ValueError(
                f"Invalid value '{value}' for {key}; expected one of {', '.join(choices)}"
            )
        return value

    def get(self, key: str, default: any = None) -> any:
        """Get configuration value."""
        return self._config.get(key, default)

    def __getitem__(self, key: str) -> any:
        """Get configuration value using dictionary syntax."""
        return self._config[key]

    def __contains__(self, key: str) -> bool:
        """Check if configuration key exists."""
        return key in self._config

    def keys(self):
        """Get all configuration keys."""
        return self._config.keys()

    def items(self):
        """Get all configuration key-value pairs."""
        return self._config.items()

    @classmethod
    def reset(cls):
        """Reset singleton for testing purposes."""
        cls._instance = None
        cls._initialized = False


__all__ = ['ConfigLoader']
