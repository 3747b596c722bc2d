from laraview.providers.view_service_provider import (
    ViewServiceProvider,
    FILES,
    EVENTS,
    COMPILER,
    ENGINE_RESOLVER,
    VIEW_FINDER,
    VIEW_FACTORY,
)

__all__ = [
    'ViewServiceProvider',
    'FILES',
    'EVENTS',
    'COMPILER',
    'ENGINE_RESOLVER',
    'VIEW_FINDER',
    'VIEW_FACTORY',
]
