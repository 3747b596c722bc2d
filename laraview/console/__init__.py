"""
Console Package
"""
from laraview.console.command import Command
from laraview.console.artisan import Artisan, main

__all__ = [
    'Command',
    'Artisan',
    'main',
]
