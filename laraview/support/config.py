"""
Config Manager - Laravel-style configuration access
Access configuration sections using dot notation
"""

import threading
from typing import Any, Callable, Dict, Optional

from laraview import defaults
from laraview.support.env_helper import EnvHelper


def _app_section() -> Dict[str, Any]:
    return {
        'env': EnvHelper.get('APP_ENV', defaults.DEFAULT_APP_ENV),
    }


def _view_section() -> Dict[str, Any]:
    engines = EnvHelper.get_dict('VIEW_ENGINES', defaults.DEFAULT_VIEW_ENGINE_EXTENSIONS)

    return {
        # Without VIEW_EXTENSIONS every extension with an engine is searched
        'extensions': EnvHelper.get_list('VIEW_EXTENSIONS', list(engines)),
        'engines': engines,
        'autoescape': EnvHelper.get_bool('VIEW_AUTOESCAPE', defaults.DEFAULT_VIEW_AUTOESCAPE),
        'check_cache': EnvHelper.get_bool('VIEW_CHECK_CACHE', defaults.DEFAULT_VIEW_CHECK_CACHE),
        'compiled_extension': EnvHelper.get(
            'VIEW_COMPILED_EXTENSION', defaults.DEFAULT_VIEW_COMPILED_EXTENSION
        ),
        'hint_delimiter': defaults.DEFAULT_VIEW_HINT_DELIMITER,
    }


def _logging_section() -> Dict[str, Any]:
    return {
        'name': defaults.DEFAULT_LOG_NAME,
        'level': EnvHelper.get('LOG_LEVEL'),
        'format': EnvHelper.get('LOG_FORMAT', defaults.DEFAULT_LOG_FORMAT),
        'file': EnvHelper.get('LOG_FILE'),
        'max_bytes': EnvHelper.get_int('LOG_MAX_BYTES', defaults.DEFAULT_LOG_MAX_BYTES),
        'backup_count': EnvHelper.get_int('LOG_BACKUP_COUNT', defaults.DEFAULT_LOG_BACKUP_COUNT),
    }


_SECTIONS: Dict[str, Callable[[], Dict[str, Any]]] = {
    'app': _app_section,
    'view': _view_section,
    'logging': _logging_section,
}


class Config:
    """
    Configuration manager with dot notation access

    Usage:
        # Get config value
        extensions = Config.get('view.extensions')

        # With default
        level = Config.get('logging.level', 'INFO')

        # Set runtime value
        Config.set('view.check_cache', False)

        # Check existence
        if Config.has('logging.file'):
            ...

    Sections are built from laraview.defaults, overridden by environment
    variables (VIEW_ENGINES, VIEW_EXTENSIONS, VIEW_AUTOESCAPE, LOG_LEVEL, ...)
    """

    _lock = threading.Lock()
    _loaded: Dict[str, Any] = {}
    _runtime_overrides: Dict[str, Any] = {}

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation (case-insensitive)

        Example:
            Config.get('view.autoescape', True)
            Config.get('VIEW.AUTOESCAPE', True)  # Same result
        """
        key_lower = key.lower()

        # Check runtime overrides first
        if key_lower in cls._runtime_overrides:
            return cls._runtime_overrides[key_lower]

        parts = key_lower.split('.')
        section = parts[0]
        path = parts[1:]

        if section not in cls._loaded:
            cls._load_section(section)

        value = cls._loaded.get(section)

        if value is None:
            return default

        # Navigate nested keys (case-insensitive)
        for part in path:
            if not isinstance(value, dict):
                return default

            for dict_key in value.keys():
                if dict_key.lower() == part:
                    value = value[dict_key]
                    break
            else:
                return default

        return value

    @classmethod
    def _load_section(cls, section: str):
        with cls._lock:
            if section in cls._loaded:
                return

            builder = _SECTIONS.get(section)
            cls._loaded[section] = builder() if builder else None

    @classmethod
    def set(cls, key: str, value: Any):
        """
        Set configuration value at runtime

        Example:
            Config.set('view.extensions', ['blade.html'])
        """
        cls._runtime_overrides[key.lower()] = value

    @classmethod
    def has(cls, key: str) -> bool:
        """Check if configuration key exists"""
        return cls.get(key) is not None

    @classmethod
    def all(cls, section: str) -> Optional[Dict[str, Any]]:
        """
        Get a whole configuration section

        Example:
            view_config = Config.all('view')
        """
        if section not in cls._loaded:
            cls._load_section(section)

        return cls._loaded.get(section)

    @classmethod
    def reload(cls, section: Optional[str] = None):
        """
        Rebuild configuration section(s) from defaults and the environment

        Args:
            section: Specific section to reload, or None to reload all
        """
        with cls._lock:
            if section:
                cls._loaded.pop(section, None)
            else:
                cls._loaded.clear()

    @classmethod
    def clear_runtime_overrides(cls):
        """Clear all runtime configuration overrides"""
        cls._runtime_overrides.clear()

    @classmethod
    def as_object(cls, key: str, default: Any = None) -> Any:
        """
        Get configuration as an object with attribute access

        Example:
            view_config = Config.as_object('view')
            if view_config.check_cache:
                ...
        """
        value = cls.get(key, default)

        if isinstance(value, dict):
            return ConfigObject(**value)

        return value


class ConfigObject:
    """
    Simple object wrapper for dict configs
    Allows attribute access to config values
    """

    def __init__(self, **kwargs):
        for key, value in kwargs.items():
            # Recursively convert nested dicts to ConfigObjects
            if isinstance(value, dict):
                setattr(self, key, ConfigObject(**value))
            else:
                setattr(self, key, value)

    def __repr__(self):
        attrs = ', '.join(f'{k}={v!r}' for k, v in self.__dict__.items())
        return f'ConfigObject({attrs})'

    def __getattr__(self, name):
        raise AttributeError(f"Config has no attribute '{name}'")
