"""
Blade Compiler
Compiles Blade-flavoured view sources into Python modules using Jinja2's
code generator, persisted under the compiled view path
"""
import hashlib
import os
import re
from typing import Callable, Dict, List, Optional

from jinja2 import Environment, Template, TemplateSyntaxError

from laraview import defaults
from laraview.exceptions import CompileException, ConfigurationException
from laraview.filesystem import Filesystem
from laraview.logging import getLogger

logger = getLogger(__name__)

DIRECTIVE_PATTERN = re.compile(r'(?<![\w@])@(\w+)')
COMMENT_PATTERN = re.compile(r'\{\{--.*?--\}\}', re.S)
RAW_ECHO_PATTERN = re.compile(r'\{!!\s*(.+?)\s*!!\}', re.S)
ESCAPED_ECHO_PATTERN = re.compile(r'@(\{\{.*?\}\})', re.S)


class BladeCompiler:
    """
    Blade view compiler

    Supported on top of the Jinja2 template language:
        {{-- comment --}}    removed from the output
        {!! expression !!}   echo without HTML escaping
        @{{ expression }}    printed literally (for client-side frameworks)
        @name(expression)    custom directives registered with directive()

    Example:
        compiler = BladeCompiler(Filesystem(), '/tmp/views')
        compiler.directive('upper', lambda expr: '{{ (%s)|upper }}' % expr)
        if compiler.is_expired(path):
            compiler.compile(path)
    """

    def __init__(
        self,
        files: Filesystem,
        cache_path: str,
        autoescape: Optional[bool] = None,
        compiled_extension: Optional[str] = None
    ):
        if not cache_path:
            raise ConfigurationException("Please provide a valid cache path.")

        if autoescape is None:
            autoescape = defaults.DEFAULT_VIEW_AUTOESCAPE
        if compiled_extension is None:
            compiled_extension = defaults.DEFAULT_VIEW_COMPILED_EXTENSION

        self.files = files
        self.cache_path = os.fspath(cache_path)
        self.compiled_extension = compiled_extension

        self._environment = Environment(autoescape=autoescape)
        self._extensions: List[Callable[[str], str]] = []
        self._custom_directives: Dict[str, Callable[[Optional[str]], str]] = {}

    def get_compiled_path(self, path: str) -> str:
        """Get the path to the compiled version of a view"""
        digest = hashlib.sha1(os.fspath(path).encode('utf-8')).hexdigest()
        return os.path.join(self.cache_path, f"{digest}.{self.compiled_extension}")

    def is_expired(self, path: str) -> bool:
        """Determine if the compiled view is missing or older than its source"""
        compiled = self.get_compiled_path(path)

        if not self.files.exists(compiled):
            return True

        return self.files.last_modified(path) >= self.files.last_modified(compiled)

    def compile(self, path: str) -> str:
        """
        Compile the view at the given path

        Returns:
            Path of the compiled artifact

        Raises:
            CompileException: If the source is not valid template syntax
            ConfigurationException: If the source or the cache path is not accessible
        """
        path = os.fspath(path)

        try:
            source = self.files.read(path)
        except PermissionError as e:
            raise ConfigurationException(f"View [{path}] is not readable.") from e

        code = self.compile_to_python(source, name=path)
        compiled = self.get_compiled_path(path)

        try:
            self.files.ensure_directory_exists(self.cache_path)
            self.files.write(compiled, code)
        except OSError as e:
            raise ConfigurationException(
                f"Compiled view path [{self.cache_path}] is not writable."
            ) from e

        logger.debug(f"Compiled view [{path}] to [{compiled}]")

        return compiled

    def compile_to_python(self, source: str, name: Optional[str] = None) -> str:
        """Translate a Blade source into the Python module source of a template"""
        try:
            return self._environment.compile(
                self.compile_string(source), name=name, filename=name, raw=True
            )
        except TemplateSyntaxError as e:
            raise CompileException(e.message, path=name, lineno=e.lineno) from e

    def compile_string(self, value: str) -> str:
        """Apply the Blade precompile passes, producing Jinja2 source"""
        value = COMMENT_PATTERN.sub('', value)
        value = ESCAPED_ECHO_PATTERN.sub(r'{% raw %}\1{% endraw %}', value)

        for extension in self._extensions:
            value = extension(value)

        value = self._compile_directives(value)

        return RAW_ECHO_PATTERN.sub(r'{{ (\1)|safe }}', value)

    def _compile_directives(self, value: str) -> str:
        if not self._custom_directives:
            return value

        output = []
        position = 0

        for match in DIRECTIVE_PATTERN.finditer(value):
            if match.start() < position:
                continue

            name = match.group(1)
            handler = self._custom_directives.get(name)
            if handler is None:
                continue

            expression, end = self._read_expression(value, match.end())
            output.append(value[position:match.start()])
            output.append(handler(expression))
            position = end

        output.append(value[position:])
        return ''.join(output)

    @staticmethod
    def _read_expression(value: str, start: int):
        """Read a balanced (...) group following a directive name"""
        index = start
        while index < len(value) and value[index] in ' \t':
            index += 1

        if index >= len(value) or value[index] != '(':
            return None, start

        depth = 0
        for position in range(index, len(value)):
            char = value[position]
            if char == '(':
                depth += 1
            elif char == ')':
                depth -= 1
                if depth == 0:
                    return value[index + 1:position], position + 1

        # Unbalanced: leave the text untouched for the template parser to report
        return None, start

    def load(self, compiled_path: str) -> Template:
        """Load a compiled artifact into an executable template"""
        source = self.files.read(compiled_path)
        code = compile(source, compiled_path, 'exec')
        environment = self._environment
        return environment.template_class.from_code(
            environment, code, environment.make_globals(None)
        )

    def extend(self, compiler: Callable[[str], str]):
        """Register a handler that rewrites the raw source before compiling"""
        self._extensions.append(compiler)

    def get_extensions(self) -> List[Callable[[str], str]]:
        return list(self._extensions)

    def directive(self, name: str, handler: Callable[[Optional[str]], str]):
        """
        Register a custom directive

        The handler receives the text inside the parentheses (or None) and
        returns the template source to put in its place.
        """
        if not re.fullmatch(r'\w+', name):
            raise ValueError(
                f"The directive name [{name}] is not valid. "
                "Directive names must only contain alphanumeric characters and underscores."
            )

        self._custom_directives[name] = handler

    def get_custom_directives(self) -> Dict[str, Callable[[Optional[str]], str]]:
        return dict(self._custom_directives)

    def get_environment(self) -> Environment:
        return self._environment
