"""
View Factory
Creates views, picks their engine and runs creator / composer hooks
"""
import os
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from laraview import defaults
from laraview.events import Dispatcher
from laraview.exceptions import EngineNotFoundException, ViewNotFoundException
from laraview.view.engines.engine import Engine, EngineKind, engine_kind
from laraview.view.engines.engine_resolver import EngineResolver
from laraview.view.finder import FileViewFinder, HINT_PATH_DELIMITER
from laraview.view.view import View


def normalize_name(name: str) -> str:
    """Normalize a view name: 'pages/home' -> 'pages.home', namespace kept"""
    if HINT_PATH_DELIMITER not in name:
        return name.replace('/', '.')

    namespace, view = name.split(HINT_PATH_DELIMITER, 1)
    return namespace + HINT_PATH_DELIMITER + view.replace('/', '.')


class Factory:
    """
    View factory

    Holds data shared with every view and the creator / composer callbacks,
    which are registered on the event dispatcher as 'creating: <view>' and
    'composing: <view>' listeners.

    Example:
        factory.share('user', {'name': 'Martin'})
        factory.composer('profile', lambda view: view.with_('count', 3))
        html = str(factory.make('profile'))
    """

    def __init__(
        self,
        engines: EngineResolver,
        finder: FileViewFinder,
        events: Dispatcher,
        extensions: Optional[Dict[str, Union[EngineKind, str]]] = None
    ):
        self.engines = engines
        self.finder = finder
        self.events = events
        self.container = None
        self.shared_data: Dict[str, Any] = {}

        if extensions is None:
            extensions = defaults.DEFAULT_VIEW_ENGINE_EXTENSIONS

        # Insertion order decides precedence: 'blade.html' must win over 'html'
        self.extensions: Dict[str, EngineKind] = {
            extension: engine_kind(kind) for extension, kind in extensions.items()
        }

    def file(
        self,
        path: Union[str, os.PathLike],
        data: Optional[Dict[str, Any]] = None,
        merge_data: Optional[Dict[str, Any]] = None
    ) -> View:
        """Get the view for the given file path, bypassing the finder"""
        path = os.fspath(path)
        view = self._view_instance(path, path, self._merge_data(data, merge_data))
        self.call_creator(view)
        return view

    def make(
        self,
        view: str,
        data: Optional[Dict[str, Any]] = None,
        merge_data: Optional[Dict[str, Any]] = None
    ) -> View:
        """
        Get the view for the given name

        Keys in data take precedence over keys in merge_data.

        Raises:
            ViewNotFoundException: If the name resolves to no file
        """
        view = normalize_name(view)
        path = self.finder.find(view)

        instance = self._view_instance(view, path, self._merge_data(data, merge_data))
        self.call_creator(instance)
        return instance

    def first(
        self,
        views: Iterable[str],
        data: Optional[Dict[str, Any]] = None,
        merge_data: Optional[Dict[str, Any]] = None
    ) -> View:
        """Get the first view that exists from the given names"""
        for view in views:
            if self.exists(view):
                return self.make(view, data, merge_data)

        raise ViewNotFoundException("None of the views in the given list exist.")

    def exists(self, view: str) -> bool:
        """Determine if a given view exists"""
        try:
            self.finder.find(normalize_name(view))
        except ViewNotFoundException:
            return False

        return True

    def _merge_data(self, data, merge_data) -> Dict[str, Any]:
        merged = dict(merge_data or {})
        merged.update(data or {})
        return merged

    def _view_instance(self, view: str, path: str, data: Dict[str, Any]) -> View:
        return View(self, self.get_engine_from_path(path), view, path, data)

    def get_engine_from_path(self, path: str) -> Engine:
        """
        Get the engine for a view path based on its extension

        Raises:
            EngineNotFoundException: If no engine is mapped to the extension
        """
        extension = self._get_extension(path)

        if extension is None:
            raise EngineNotFoundException(f"Unrecognized extension in file: {path}.")

        return self.engines.resolve(self.extensions[extension])

    def _get_extension(self, path: str) -> Optional[str]:
        for extension in self.extensions:
            if path.endswith('.' + extension):
                return extension
        return None

    def share(self, key, value: Any = None) -> Any:
        """
        Add a piece of shared data to the environment

        Example:
            factory.share('user', user)
            factory.share({'user': user, 'title': 'Home'})
        """
        if isinstance(key, dict):
            self.shared_data.update(key)
        else:
            self.shared_data[key] = value

        return value

    def shared(self, key: str, default: Any = None) -> Any:
        """Get an item from the shared data"""
        return self.shared_data.get(key, default)

    def get_shared(self) -> Dict[str, Any]:
        return self.shared_data

    def composer(self, views: Union[str, Iterable[str]], callback) -> List[Callable]:
        """
        Register a view composer, run right before the view renders

        The callback receives the View; objects with a compose() method
        are accepted as well. '*' wildcards match several views.
        """
        return self._add_view_event('composing', views, callback)

    def creator(self, views: Union[str, Iterable[str]], callback) -> List[Callable]:
        """Register a view creator, run as soon as the view is made"""
        return self._add_view_event('creating', views, callback)

    def _add_view_event(self, prefix: str, views, callback) -> List[Callable]:
        if isinstance(views, str):
            views = [views]

        method = 'compose' if prefix == 'composing' else 'create'
        listener = getattr(callback, method, callback)

        registered = []
        for view in views:
            self.events.listen(f"{prefix}: {normalize_name(view)}", listener)
            registered.append(listener)

        return registered

    def call_composer(self, view: View):
        """Call the composers for a given view"""
        self.events.fire(f"composing: {view.name}", [view])

    def call_creator(self, view: View):
        """Call the creators for a given view"""
        self.events.fire(f"creating: {view.name}", [view])

    def add_location(self, location: Union[str, os.PathLike]):
        self.finder.add_location(location)

    def prepend_location(self, location: Union[str, os.PathLike]):
        self.finder.prepend_location(location)

    def add_namespace(self, namespace: str, hints) -> 'Factory':
        self.finder.add_namespace(namespace, hints)
        return self

    def prepend_namespace(self, namespace: str, hints) -> 'Factory':
        self.finder.prepend_namespace(namespace, hints)
        return self

    def replace_namespace(self, namespace: str, hints) -> 'Factory':
        self.finder.replace_namespace(namespace, hints)
        return self

    def add_extension(self, extension: str, engine: Union[EngineKind, str]):
        """Register a view extension with one of the known engines, highest priority first"""
        kind = engine_kind(engine)
        self.finder.add_extension(extension)

        extensions = {extension: kind}
        extensions.update((ext, value) for ext, value in self.extensions.items() if ext != extension)
        self.extensions = extensions

    def get_extensions(self) -> Dict[str, EngineKind]:
        return dict(self.extensions)

    def flush_finder_cache(self):
        self.finder.flush()

    def get_engine_resolver(self) -> EngineResolver:
        return self.engines

    def get_finder(self) -> FileViewFinder:
        return self.finder

    def set_finder(self, finder: FileViewFinder):
        self.finder = finder

    def get_dispatcher(self) -> Dispatcher:
        return self.events

    def set_dispatcher(self, events: Dispatcher):
        self.events = events

    def get_container(self):
        return self.container

    def set_container(self, container):
        self.container = container
