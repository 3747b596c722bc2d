"""
Facade System
Static access to the view layer's container bindings
"""
from typing import Any, Dict, Optional

from laraview.container import Container

# Container shared by every facade
_app_instance: Optional[Container] = None

# Facade roots already resolved, keyed by accessor
_resolved_instances: Dict[str, Any] = {}


class FacadeMeta(type):
    """Proxies unknown class attributes to the facade root"""

    def __getattr__(cls, name: str) -> Any:
        return getattr(cls.get_facade_root(), name)


class Facade(metaclass=FacadeMeta):
    """
    Base Facade class

    Subclasses name a container binding in get_facade_accessor(); class
    attribute access is then forwarded to the object bound there. Roots
    are resolved once per accessor until the container changes.

    Example:
        class View(Facade):
            @classmethod
            def get_facade_accessor(cls):
                return 'view.factory'

        Facade.set_app(blade)
        html = str(View.make('index'))
    """

    @classmethod
    def get_facade_accessor(cls) -> str:
        raise NotImplementedError(
            f"Facade {cls.__name__} does not implement get_facade_accessor()"
        )

    @classmethod
    def get_facade_root(cls) -> Any:
        """
        Get the object behind the facade

        Raises:
            RuntimeError: If no container is set
        """
        accessor = cls.get_facade_accessor()

        if accessor in _resolved_instances:
            return _resolved_instances[accessor]

        app = cls.get_app()

        if app is None:
            raise RuntimeError(
                f"Facade {cls.__name__} cannot access the container. "
                "Make sure to call Facade.set_app(container) during bootstrap."
            )

        _resolved_instances[accessor] = app.make(accessor)
        return _resolved_instances[accessor]

    @classmethod
    def swap(cls, instance: Any):
        """Put another object behind this facade (e.g. a fake in tests)"""
        _resolved_instances[cls.get_facade_accessor()] = instance

    @classmethod
    def get_app(cls) -> Optional[Container]:
        return _app_instance

    @classmethod
    def set_app(cls, app):
        """
        Set the container used by all facades

        Args:
            app: Container, or a ViewService whose container is used
        """
        global _app_instance
        _app_instance = getattr(app, 'app', app)
        cls.clear_resolved_instances()

    @classmethod
    def clear_resolved_instances(cls):
        _resolved_instances.clear()

    @classmethod
    def clear_app(cls):
        """Forget the container and every resolved root"""
        global _app_instance
        _app_instance = None
        cls.clear_resolved_instances()
