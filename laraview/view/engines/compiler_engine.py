"""
Compiler Engine
Evaluates views through the Blade compiler, recompiling stale artifacts
"""
import threading
from typing import Any, Dict, List, Optional, Tuple

from jinja2 import Template

from laraview.filesystem import Filesystem
from laraview.logging import getLogger
from laraview.view.compilers.blade_compiler import BladeCompiler
from laraview.view.engines.engine import Engine

logger = getLogger(__name__)


class CompilerEngine(Engine):
    """
    Engine for compiled views

    Compiled artifacts are written by the compiler; loaded templates are kept
    in memory keyed by the artifact path and its modification time, so a
    recompiled artifact is picked up on the next render.
    """

    def __init__(self, compiler: BladeCompiler, files: Filesystem, check_cache: bool = True):
        self.compiler = compiler
        self.files = files
        self.check_cache = check_cache
        # Evaluation stack, one per thread
        self._local = threading.local()
        self._loaded: Dict[str, Tuple[float, Template]] = {}
        self._lock = threading.Lock()

    def get(self, path: str, data: Dict[str, Any]) -> str:
        """
        Get the evaluated contents of the view

        The view is compiled first when its artifact is missing or, with
        cache checks enabled, older than the source.
        """
        stack = self._compiling()
        stack.append(path)

        try:
            compiled = self.compiler.get_compiled_path(path)

            if self._should_compile(path, compiled):
                self.compiler.compile(path)
                self.forget_loaded(compiled)

            template = self._load(compiled)
            return template.render(data)
        finally:
            stack.pop()

    def _compiling(self) -> List[str]:
        """Stack of views being evaluated by the current thread"""
        if not hasattr(self._local, 'stack'):
            self._local.stack = []
        return self._local.stack

    def _should_compile(self, path: str, compiled: str) -> bool:
        if self.check_cache:
            return self.compiler.is_expired(path)
        return not self.files.exists(compiled)

    def _load(self, compiled: str) -> Template:
        mtime = self.files.last_modified(compiled)

        with self._lock:
            cached = self._loaded.get(compiled)
            if cached is not None and cached[0] == mtime:
                return cached[1]

            template = self.compiler.load(compiled)
            self._loaded[compiled] = (mtime, template)
            logger.debug(f"Loaded compiled view [{compiled}]")
            return template

    def forget_loaded(self, compiled: Optional[str] = None):
        """Drop loaded templates from memory (all when no path is given)"""
        with self._lock:
            if compiled is None:
                self._loaded.clear()
            else:
                self._loaded.pop(compiled, None)

    def get_compiler(self) -> BladeCompiler:
        return self.compiler

    def get_last_compiled(self) -> Optional[str]:
        """Path of the view currently being evaluated, if any"""
        stack = self._compiling()
        return stack[-1] if stack else None
