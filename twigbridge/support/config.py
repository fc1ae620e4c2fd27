"""
Config - bridge settings read from the host application's config/ package
"""

import importlib
import threading
from typing import Any, Dict, Optional

_MISSING = object()


class Config:
    """
    Case-insensitive dot-notation access to config/<file>.py modules

    The first segment names the module, the rest walk its attributes and
    dict keys:

        Config.get('view.PATHS')                      # config/view.py: PATHS
        Config.get('twigbridge.TWIG.namespaces', {})  # config/twigbridge.py: TWIG['namespaces']

    Values set with Config.set() shadow the files until
    clear_runtime_overrides().
    """

    _lock = threading.Lock()
    _loaded: Dict[str, Any] = {}
    _runtime_overrides: Dict[str, Any] = {}

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        key = key.lower()

        if key in cls._runtime_overrides:
            return cls._runtime_overrides[key]

        file_name, *parts = key.split('.')
        if file_name not in cls._loaded:
            cls._load_config_file(file_name)

        value = cls._loaded[file_name]
        if value is None:
            return default

        for part in parts:
            value = cls._lookup(value, part)
            if value is _MISSING:
                return default

        return value

    @staticmethod
    def _lookup(value: Any, part: str) -> Any:
        if isinstance(value, dict):
            for dict_key in value:
                if str(dict_key).lower() == part:
                    return value[dict_key]
            return _MISSING

        if hasattr(value, '__dict__'):
            for attr_name in dir(value):
                if attr_name.lower() == part:
                    return getattr(value, attr_name)

        return _MISSING

    @classmethod
    def _load_config_file(cls, file_name: str):
        with cls._lock:
            if file_name in cls._loaded:
                return

            try:
                cls._loaded[file_name] = importlib.import_module(f'config.{file_name}')
            except ImportError:
                # host has no config/<file_name>.py; every key falls back to its default
                cls._loaded[file_name] = None

    @classmethod
    def set(cls, key: str, value: Any):
        """Override a key for the life of the process"""
        cls._runtime_overrides[key.lower()] = value

    @classmethod
    def has(cls, key: str) -> bool:
        return cls.get(key) is not None

    @classmethod
    def reload(cls, file_name: Optional[str] = None):
        """Forget loaded modules (one, or all) so the next get() re-imports"""
        with cls._lock:
            if file_name:
                cls._loaded.pop(file_name.lower(), None)
            else:
                cls._loaded.clear()

    @classmethod
    def clear_runtime_overrides(cls):
        cls._runtime_overrides.clear()
