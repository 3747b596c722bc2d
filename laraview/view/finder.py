"""
File View Finder
Resolves logical view names ("pages.home", "mail::welcome") to source files
"""
import os
from typing import Dict, Iterable, List, Optional, Sequence, Union

from laraview import defaults
from laraview.exceptions import ViewNotFoundException
from laraview.filesystem import Filesystem

HINT_PATH_DELIMITER = defaults.DEFAULT_VIEW_HINT_DELIMITER


class FileViewFinder:
    """
    Finds view files across an ordered list of locations

    The first location containing a matching file wins; within a location
    extensions are tried in priority order. Results are cached until flush().
    """

    def __init__(
        self,
        files: Filesystem,
        paths: Iterable[Union[str, os.PathLike]],
        extensions: Optional[Sequence[str]] = None
    ):
        self.files = files
        self.paths: List[str] = [self._resolve_path(path) for path in paths]
        self.views: Dict[str, str] = {}
        self.hints: Dict[str, List[str]] = {}
        self.extensions: List[str] = list(
            extensions if extensions is not None else defaults.DEFAULT_VIEW_EXTENSIONS
        )

    def find(self, name: str) -> str:
        """
        Get the fully qualified location of the view

        Raises:
            ViewNotFoundException: If no location holds a matching file
        """
        name = name.strip()

        if name in self.views:
            return self.views[name]

        if self.has_hint_information(name):
            path = self._find_namespaced_view(name)
        else:
            path = self._find_in_paths(name, self.paths)

        self.views[name] = path
        return path

    def _find_namespaced_view(self, name: str) -> str:
        namespace, view = self._parse_namespace_segments(name)
        return self._find_in_paths(view, self.hints[namespace], original=name)

    def _parse_namespace_segments(self, name: str):
        segments = name.split(HINT_PATH_DELIMITER)

        if len(segments) != 2 or not segments[0] or not segments[1]:
            raise ViewNotFoundException(f"View [{name}] has an invalid name.", view=name)

        if segments[0] not in self.hints:
            raise ViewNotFoundException(f"No hint path defined for [{segments[0]}].", view=name)

        return segments[0], segments[1]

    def _find_in_paths(self, name: str, paths: Iterable[str], original: Optional[str] = None) -> str:
        view = original or name
        segments = name.split('.')

        # Empty segments would turn the name into an absolute or parent path
        if not all(segments):
            raise ViewNotFoundException(f"View [{view}] has an invalid name.", view=view)

        relative = os.path.join(*segments)

        for path in paths:
            for file in self._get_possible_view_files(relative):
                view_path = os.path.join(path, file)
                if self.files.is_file(view_path) and self._is_within(path, view_path):
                    return view_path

        raise ViewNotFoundException(f"View [{view}] not found.", view=view)

    @staticmethod
    def _is_within(directory: str, path: str) -> bool:
        root = os.path.realpath(directory)
        return os.path.commonpath([root, os.path.realpath(path)]) == root

    def _get_possible_view_files(self, name: str) -> List[str]:
        return [f"{name}.{extension}" for extension in self.extensions]

    def add_location(self, location: Union[str, os.PathLike]):
        """Add a location to the end of the search list"""
        self.paths.append(self._resolve_path(location))

    def prepend_location(self, location: Union[str, os.PathLike]):
        """Add a location to the front of the search list"""
        self.paths.insert(0, self._resolve_path(location))

    def add_namespace(self, namespace: str, hints):
        """Add hint paths for a namespace, searched after existing ones"""
        hints = [self._resolve_path(hint) for hint in self._as_list(hints)]
        self.hints[namespace] = self.hints.get(namespace, []) + hints

    def prepend_namespace(self, namespace: str, hints):
        """Add hint paths for a namespace, searched before existing ones"""
        hints = [self._resolve_path(hint) for hint in self._as_list(hints)]
        self.hints[namespace] = hints + self.hints.get(namespace, [])

    def replace_namespace(self, namespace: str, hints):
        """Replace the hint paths of a namespace"""
        self.hints[namespace] = [self._resolve_path(hint) for hint in self._as_list(hints)]

    def add_extension(self, extension: str):
        """Register an extension, giving it the highest priority"""
        if extension in self.extensions:
            self.extensions.remove(extension)

        self.extensions.insert(0, extension)

    def has_hint_information(self, name: str) -> bool:
        """Returns whether the view name carries a namespace hint"""
        return HINT_PATH_DELIMITER in name

    def flush(self):
        """Flush the cache of located views"""
        self.views = {}

    def get_files(self) -> Filesystem:
        return self.files

    def get_paths(self) -> List[str]:
        return list(self.paths)

    def get_views(self) -> Dict[str, str]:
        return dict(self.views)

    def get_hints(self) -> Dict[str, List[str]]:
        return {namespace: list(paths) for namespace, paths in self.hints.items()}

    def get_extensions(self) -> List[str]:
        return list(self.extensions)

    @staticmethod
    def _resolve_path(path: Union[str, os.PathLike]) -> str:
        return os.path.abspath(os.fspath(path))

    @staticmethod
    def _as_list(value) -> list:
        if isinstance(value, (str, os.PathLike)):
            return [value]
        return list(value)
