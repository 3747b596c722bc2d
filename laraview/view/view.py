"""
View
A named view source plus the data bound to it for one render
"""
from typing import Any, Callable, Dict, Optional, TYPE_CHECKING

from markupsafe import Markup

if TYPE_CHECKING:
    from laraview.view.engines.engine import Engine
    from laraview.view.factory import Factory


class View:
    """
    Lazily rendered view

    Nothing is compiled or evaluated until render() (or str()) is called.

    Example:
        view = factory.make('index').with_('user', {'name': 'Sebastian'})
        html = str(view)
    """

    def __init__(
        self,
        factory: 'Factory',
        engine: 'Engine',
        view: str,
        path: str,
        data: Optional[Dict[str, Any]] = None
    ):
        self.factory = factory
        self.engine = engine
        self.view = view
        self.path = path
        self.data: Dict[str, Any] = dict(data or {})

    def render(self, callback: Optional[Callable[['View', str], Optional[str]]] = None) -> str:
        """
        Get the string contents of the view

        Composers registered for the view run first and may still modify
        its data. The optional callback receives (view, contents) and may
        return replacement contents.
        """
        self.factory.call_composer(self)

        contents = self.engine.get(self.path, self.gather_data())

        if callback is not None:
            response = callback(self, contents)
            if response is not None:
                contents = response

        return contents

    def gather_data(self) -> Dict[str, Any]:
        """Shared data overlaid with the view's own data, nested views rendered"""
        data = dict(self.factory.get_shared())
        data.update(self.data)

        for key, value in data.items():
            if isinstance(value, View):
                data[key] = Markup(value.render())

        return data

    def with_(self, key, value: Any = None) -> 'View':
        """
        Add a piece of data to the view

        Example:
            view.with_('user', user)
            view.with_({'user': user, 'title': 'Home'})
        """
        if isinstance(key, dict):
            self.data.update(key)
        else:
            self.data[key] = value

        return self

    def nest(self, key: str, view: str, data: Optional[Dict[str, Any]] = None) -> 'View':
        """Add another view, rendered into this one under the given key"""
        return self.with_(key, self.factory.make(view, data))

    @property
    def name(self) -> str:
        return self.view

    def get_name(self) -> str:
        return self.view

    def get_data(self) -> Dict[str, Any]:
        return self.data

    def get_path(self) -> str:
        return self.path

    def set_path(self, path: str):
        self.path = path

    def get_factory(self) -> 'Factory':
        return self.factory

    def get_engine(self) -> 'Engine':
        return self.engine

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def __setitem__(self, key: str, value: Any):
        self.with_(key, value)

    def __delitem__(self, key: str):
        del self.data[key]

    def __contains__(self, key: str) -> bool:
        return key in self.data

    def __str__(self) -> str:
        return self.render()

    def __html__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"<View {self.view!r} path={self.path!r}>"
