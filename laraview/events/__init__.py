"""
Events Package
"""
from laraview.events.dispatcher import Dispatcher

__all__ = ['Dispatcher']
