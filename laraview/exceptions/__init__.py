"""
Exceptions Package
Exceptions raised by the view layer
"""
from laraview.exceptions.custom import (
    ViewException,
    ViewNotFoundException,
    CompileException,
    ConfigurationException,
    EngineNotFoundException,
    FileNotFoundException,
    BindingResolutionException,
)

__all__ = [
    'ViewException',
    'ViewNotFoundException',
    'CompileException',
    'ConfigurationException',
    'EngineNotFoundException',
    'FileNotFoundException',
    'BindingResolutionException',
]
