"""
Facades Package
Laravel-style facades for static access to services
"""
from laraview.support.facades.facade import Facade
from laraview.support.facades.view import View

__all__ = [
    'Facade',
    'View',
]
