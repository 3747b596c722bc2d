"""
Engine Resolver
Lazily builds and memoizes one engine per engine kind
"""
from typing import Callable, Dict, Union

from laraview.exceptions import EngineNotFoundException
from laraview.view.engines.engine import Engine, EngineKind, engine_kind


class EngineResolver:
    """
    Registry of engine resolvers keyed by EngineKind

    Example:
        resolver = EngineResolver()
        resolver.register(EngineKind.FILE, lambda: FileEngine(files))
        engine = resolver.resolve('file')
    """

    def __init__(self):
        self.resolvers: Dict[EngineKind, Callable[[], Engine]] = {}
        self.resolved: Dict[EngineKind, Engine] = {}

    def register(self, kind: Union[EngineKind, str], resolver: Callable[[], Engine]):
        """Register a resolver, replacing any engine already resolved for the kind"""
        kind = engine_kind(kind)
        self.resolved.pop(kind, None)
        self.resolvers[kind] = resolver

    def resolve(self, kind: Union[EngineKind, str]) -> Engine:
        """Resolve an engine instance by kind"""
        kind = engine_kind(kind)

        if kind in self.resolved:
            return self.resolved[kind]

        if kind in self.resolvers:
            self.resolved[kind] = self.resolvers[kind]()
            return self.resolved[kind]

        raise EngineNotFoundException(f"Engine [{kind.value}] not found.")

    def forget(self, kind: Union[EngineKind, str]):
        """Forget a resolved engine so the next resolve() rebuilds it"""
        self.resolved.pop(engine_kind(kind), None)
