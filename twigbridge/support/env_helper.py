"""
EnvHelper - Read .env files into the environment
Laravel-style environment variable access
"""

import os
import threading
from pathlib import Path
from typing import Optional, Any, Union
from dotenv import load_dotenv


class EnvHelper:
    """
    Environment variable reader with lazy .env loading

    Usage:
        debug = EnvHelper.get_bool('APP_DEBUG', False)
        env = EnvHelper.get('APP_ENV', 'production')
    """

    _lock = threading.Lock()
    _env_path: Optional[Path] = None
    _loaded: bool = False

    @classmethod
    def initialize(cls, env_path: Union[str, Path, None] = None):
        """
        Set the .env location (defaults to .env in the application base path)
        """
        if env_path is None:
            from twigbridge.support.storage import Storage
            env_path = Storage.base('.env')

        cls._env_path = Path(env_path)
        cls._loaded = False

    @classmethod
    def load(cls, env_path: Union[str, Path, None] = None, override: bool = False) -> bool:
        """
        Load .env file into environment

        Args:
            env_path: Path to .env file (defaults to initialized path)
            override: Whether to override existing environment variables

        Returns:
            bool: True if a file was loaded
        """
        with cls._lock:
            if env_path:
                cls._env_path = Path(env_path)

            if cls._env_path is None:
                cls.initialize()

            cls._loaded = True
            if not cls._env_path.exists():
                return False

            return load_dotenv(cls._env_path, override=override)

    @classmethod
    def get(cls, key: str, default: Any = None) -> Optional[str]:
        """
        Get environment variable value

        Example:
            app_env = EnvHelper.get('APP_ENV', 'production')
        """
        if not cls._loaded:
            cls.load()

        return os.getenv(key, default)

    @classmethod
    def get_bool(cls, key: str, default: bool = False) -> bool:
        """Get boolean environment variable"""
        value = cls.get(key)
        if value is None:
            return default

        return value.lower() in ('true', '1', 'yes', 'on')

    @classmethod
    def get_int(cls, key: str, default: int = 0) -> int:
        """Get integer environment variable"""
        value = cls.get(key)
        if value is None:
            return default

        try:
            return int(value)
        except ValueError:
            return default
