"""
Blade
Standalone facade over the view layer: wires the container and renders views
"""
import os
from typing import Any, Dict, Iterable, Optional, Union

from laraview.container import Container
from laraview.events import Dispatcher
from laraview.filesystem import Filesystem
from laraview.logging import getLogger
from laraview.providers import (
    ViewServiceProvider,
    FILES,
    EVENTS,
    COMPILER,
    ENGINE_RESOLVER,
    VIEW_FINDER,
    VIEW_FACTORY,
)
from laraview.view.compilers import BladeCompiler
from laraview.view.engines import EngineResolver
from laraview.view.factory import Factory
from laraview.view.finder import FileViewFinder
from laraview.view.view import View

logger = getLogger(__name__)

PathType = Union[str, os.PathLike]


class ViewService:
    """
    Blade views outside of a full-stack framework

    Nothing is read from disk at construction; missing directories surface
    on first render. Pass a container, dispatcher or filesystem to share
    them between several services.

    Example:
        blade = ViewService('resources/views', 'storage/cache/views')

        html = str(blade.render('index', {'user': {'name': 'Sebastian'}}))

        blade.render().share('user', {'name': 'Martin'})
        blade.render().composer('profile', lambda view: view.with_('count', 3))
    """

    def __init__(
        self,
        view_paths: Union[PathType, Iterable[PathType]],
        cache_path: PathType,
        container: Optional[Container] = None,
        events: Optional[Dispatcher] = None,
        files: Optional[Filesystem] = None
    ):
        if isinstance(view_paths, (str, os.PathLike)):
            view_paths = [view_paths]

        self._view_paths = tuple(view_paths)
        self._cache_path = cache_path
        self.app = container if container is not None else Container()

        provider = ViewServiceProvider(
            self.app, self._view_paths, self._cache_path, events=events, files=files
        )
        provider.register()
        provider.boot()

        logger.debug(f"View service registered with {len(self._view_paths)} view path(s)")

    def render(
        self,
        view: Optional[str] = None,
        data: Optional[Dict[str, Any]] = None,
        merge_data: Optional[Dict[str, Any]] = None
    ) -> Union[Factory, View]:
        """
        Get the view factory, or a view for the given name

        Called without a view name the factory itself is returned, for
        sharing data, registering composers or checking existence.
        The returned View renders lazily: str(view) evaluates it.

        Raises:
            ViewNotFoundException: If the view name resolves to no file
        """
        if view is None:
            return self.factory

        return self.factory.make(view, data, merge_data)

    def exists(self, view: str) -> bool:
        """Determine if a given view exists"""
        return self.factory.exists(view)

    @property
    def view_paths(self) -> tuple:
        return self._view_paths

    @property
    def cache_path(self) -> PathType:
        return self._cache_path

    @property
    def files(self) -> Filesystem:
        return self.app.make(FILES)

    @property
    def events(self) -> Dispatcher:
        return self.app.make(EVENTS)

    @property
    def compiler(self) -> BladeCompiler:
        return self.app.make(COMPILER)

    @property
    def engines(self) -> EngineResolver:
        return self.app.make(ENGINE_RESOLVER)

    @property
    def finder(self) -> FileViewFinder:
        return self.app.make(VIEW_FINDER)

    @property
    def factory(self) -> Factory:
        return self.app.make(VIEW_FACTORY)
