"""
EnvHelper - Read environment variables with .env support
Laravel-style environment variable access
"""

import os
import threading
from typing import Optional, Any, Dict, List
from dotenv import load_dotenv, find_dotenv


class EnvHelper:
    """
    Environment variable reader with .env file support

    Usage:
        # Read
        value = EnvHelper.get('APP_ENV', 'production')

        # Typed reads
        debug = EnvHelper.get_bool('VIEW_CHECK_CACHE', True)
        extensions = EnvHelper.get_list('VIEW_EXTENSIONS', ['blade.html'])

        # Load a specific file
        EnvHelper.load('/path/to/.env')
    """

    _lock = threading.Lock()
    _env_path = None
    _loaded: bool = False

    @classmethod
    def load(cls, env_path=None, override: bool = False) -> bool:
        """
        Load .env file into environment

        Args:
            env_path: Path to .env file (defaults to the nearest .env from the working directory)
            override: Whether to override existing environment variables

        Returns:
            bool: True if a .env file was found and loaded
        """
        with cls._lock:
            if env_path:
                cls._env_path = env_path

            if cls._env_path is None:
                cls._env_path = find_dotenv(usecwd=True) or None

            cls._loaded = True

            if not cls._env_path:
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
        """
        Get boolean environment variable

        Example:
            autoescape = EnvHelper.get_bool('VIEW_AUTOESCAPE', True)
        """
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

    @classmethod
    def get_list(cls, key: str, default: Optional[List[str]] = None) -> List[str]:
        """
        Get comma separated environment variable as a list

        Example:
            # VIEW_EXTENSIONS=blade.html,html
            extensions = EnvHelper.get_list('VIEW_EXTENSIONS')
        """
        value = cls.get(key)
        if value is None:
            return list(default or [])

        return [item.strip() for item in value.split(',') if item.strip()]

    @classmethod
    def get_dict(cls, key: str, default: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        """
        Get comma separated key:value pairs as a dict, in the given order

        Example:
            # VIEW_ENGINES=blade.html:blade,txt:file
            engines = EnvHelper.get_dict('VIEW_ENGINES')
        """
        value = cls.get(key)
        if value is None:
            return dict(default or {})

        pairs = {}
        for item in value.split(','):
            name, separator, setting = item.partition(':')
            if separator and name.strip():
                pairs[name.strip()] = setting.strip()

        return pairs

    @classmethod
    def has(cls, key: str) -> bool:
        """Check if environment variable is set"""
        return cls.get(key) is not None
