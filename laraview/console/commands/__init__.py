from laraview.console.commands.view_cache_command import ViewCacheCommand
from laraview.console.commands.view_clear_command import ViewClearCommand

__all__ = [
    'ViewCacheCommand',
    'ViewClearCommand',
]
