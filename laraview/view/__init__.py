"""
View Package
Blade views: finder, engines, compiler and factory
"""
from laraview.view.factory import Factory
from laraview.view.finder import FileViewFinder
from laraview.view.view import View

__all__ = [
    'Factory',
    'FileViewFinder',
    'View',
]
