"""
Support Classes
"""

from laraview.support.env_helper import EnvHelper
from laraview.support.config import Config, ConfigObject

__all__ = [
    'EnvHelper',
    'Config',
    'ConfigObject',
]
