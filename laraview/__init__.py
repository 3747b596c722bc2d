"""
laraview
Blade views outside of a full-stack framework
"""

from laraview.blade import ViewService
from laraview.container import Container
from laraview.events import Dispatcher
from laraview.filesystem import Filesystem
from laraview.exceptions import (
    ViewException,
    ViewNotFoundException,
    CompileException,
    ConfigurationException,
)

__version__ = '1.0.0'

__all__ = [
    'ViewService',
    'Container',
    'Dispatcher',
    'Filesystem',
    'ViewException',
    'ViewNotFoundException',
    'CompileException',
    'ConfigurationException',
]
