"""
Storage - Application paths
Resolves the views and logs directories and is the view finder's
default filesystem
"""

import os
from pathlib import Path
from typing import Union


class Storage:
    """
    Path helper rooted at the application base directory

    Layout the bridge expects:
    /
    ├── .env
    ├── resources/views/    # default view search path
    └── storage/logs/       # twigbridge.log
    """

    _base_path: Path = None

    @classmethod
    def initialize(cls, base_path: Union[str, Path] = None):
        """Set the base directory (defaults to the working directory)"""
        if base_path is None:
            base_path = os.getcwd()

        cls._base_path = Path(base_path).resolve()

    @classmethod
    def base(cls, *paths: str) -> Path:
        """
        Path under the base directory

        Example:
            Storage.base('.env')  # /project/.env
        """
        if cls._base_path is None:
            cls.initialize()

        # '/views' is relative to the base, not the filesystem root
        return cls._base_path.joinpath(*(p.lstrip('/') for p in paths))

    @classmethod
    def views(cls, *paths: str) -> Path:
        return cls.base('resources', 'views', *paths)

    @classmethod
    def logs(cls, *paths: str) -> Path:
        return cls.base('storage', 'logs', *paths)

    @classmethod
    def ensure_directory(cls, path: Union[str, Path]) -> Path:
        path_obj = Path(path)
        path_obj.mkdir(parents=True, exist_ok=True)
        return path_obj

    @classmethod
    def exists(cls, path: Union[str, Path]) -> bool:
        """Whether a view candidate exists (file or directory)"""
        return Path(path).exists()


Storage.initialize()
