from laraview.view.engines.engine import Engine, EngineKind, engine_kind
from laraview.view.engines.file_engine import FileEngine
from laraview.view.engines.compiler_engine import CompilerEngine
from laraview.view.engines.engine_resolver import EngineResolver

__all__ = [
    'Engine',
    'EngineKind',
    'engine_kind',
    'FileEngine',
    'CompilerEngine',
    'EngineResolver',
]
