"""
View Service Provider
Registers the view layer in the container, leaves first
"""
import os
from typing import Optional, Sequence, Union

from laraview.container import Container
from laraview.events import Dispatcher
from laraview.exceptions import ConfigurationException
from laraview.filesystem import Filesystem
from laraview.logging import getLogger
from laraview.service_provider import ServiceProvider
from laraview.support import Config
from laraview.view.compilers import BladeCompiler
from laraview.view.engines import CompilerEngine, EngineKind, EngineResolver, FileEngine
from laraview.view.factory import Factory
from laraview.view.finder import FileViewFinder

logger = getLogger(__name__)

# Container keys
FILES = 'files'
EVENTS = 'events'
COMPILER = 'compiler'
ENGINE_RESOLVER = 'engine.resolver'
VIEW_FINDER = 'view.finder'
VIEW_FACTORY = 'view.factory'


class ViewServiceProvider(ServiceProvider):
    """
    Service provider for the view layer

    Bindings, in dependency order:
        files            Filesystem       (kept when already bound / supplied)
        events           Dispatcher       (kept when already bound / supplied)
        compiler         BladeCompiler
        engine.resolver  EngineResolver   (file + blade engines)
        view.finder      FileViewFinder
        view.factory     Factory
    """

    def __init__(
        self,
        app: Container,
        view_paths: Sequence[Union[str, os.PathLike]],
        cache_path: Union[str, os.PathLike],
        events: Optional[Dispatcher] = None,
        files: Optional[Filesystem] = None
    ):
        super().__init__(app)
        self.view_paths = tuple(view_paths)
        self.cache_path = cache_path
        self.events = events
        self.files = files

    def register(self):
        self.register_filesystem()
        self.register_events()
        self.register_blade_compiler()
        self.register_engine_resolver()
        self.register_view_finder()
        self.register_factory()

    def register_filesystem(self):
        if self.files is not None:
            self.app.instance(FILES, self.files)
        else:
            self.app.singleton_if(FILES, lambda app: Filesystem())

    def register_events(self):
        if self.events is not None:
            self.app.instance(EVENTS, self.events)
        else:
            self.app.singleton_if(EVENTS, lambda app: Dispatcher())

    def register_blade_compiler(self):
        def make_compiler(app):
            return BladeCompiler(
                app[FILES],
                self.cache_path,
                autoescape=Config.get('view.autoescape'),
                compiled_extension=Config.get('view.compiled_extension')
            )

        self.app.singleton(COMPILER, make_compiler)

    def register_engine_resolver(self):
        def make_resolver(app):
            resolver = EngineResolver()
            self.register_file_engine(resolver, app)
            self.register_blade_engine(resolver, app)
            return resolver

        self.app.singleton(ENGINE_RESOLVER, make_resolver)

    def register_file_engine(self, resolver: EngineResolver, app: Container):
        resolver.register(EngineKind.FILE, lambda: FileEngine(app[FILES]))

    def register_blade_engine(self, resolver: EngineResolver, app: Container):
        resolver.register(
            EngineKind.BLADE,
            lambda: CompilerEngine(
                app[COMPILER],
                app[FILES],
                check_cache=Config.get('view.check_cache', True)
            )
        )

    def register_view_finder(self):
        def make_finder(app):
            return FileViewFinder(
                app[FILES],
                self.view_paths,
                extensions=Config.get('view.extensions')
            )

        self.app.singleton(VIEW_FINDER, make_finder)

    def register_factory(self):
        def make_factory(app):
            factory = Factory(
                app[ENGINE_RESOLVER],
                app[VIEW_FINDER],
                app[EVENTS],
                extensions=Config.get('view.engines')
            )

            unmapped = [
                extension for extension in factory.get_finder().get_extensions()
                if extension not in factory.get_extensions()
            ]
            if unmapped:
                raise ConfigurationException(
                    f"No view engine configured for extension(s) [{', '.join(unmapped)}]. "
                    "Map them in VIEW_ENGINES (e.g. txt:file)."
                )

            factory.set_container(app)
            factory.share('app', app)

            logger.debug(f"View factory ready for paths {list(self.view_paths)}")

            return factory

        self.app.singleton(VIEW_FACTORY, make_factory)
