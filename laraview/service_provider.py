"""
Service Provider Base Class
Laravel-style service providers for registering services in the container
"""
from abc import ABC
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from laraview.container import Container


class ServiceProvider(ABC):
    """
    Base Service Provider class

    Service providers are the central place for wiring services:
    register() binds services in the container, boot() runs once every
    provider has registered.
    """

    def __init__(self, app: 'Container'):
        self.app = app

    def register(self):
        """
        Register services in the container

        Example:
            self.app.singleton('files', lambda app: Filesystem())
        """
        pass

    def boot(self):
        """Bootstrap services (after all providers are registered)"""
        pass
