"""
View Engines
The closed set of engines a view can be evaluated with
"""
from enum import Enum
from typing import Any, Dict

from laraview.exceptions import EngineNotFoundException


class EngineKind(str, Enum):
    """Engines known to the view factory"""

    # Serves the file contents as-is
    FILE = "file"

    # Compiles Blade sources and evaluates the compiled template
    BLADE = "blade"


def engine_kind(value) -> EngineKind:
    """Coerce an engine name to its EngineKind"""
    try:
        return EngineKind(value)
    except ValueError:
        raise EngineNotFoundException(f"Engine [{value}] not found.") from None


class Engine:
    """Base class for view engines"""

    def get(self, path: str, data: Dict[str, Any]) -> str:
        """Get the evaluated contents of the view at the given path"""
        raise NotImplementedError(f"Engine {self.__class__.__name__} does not implement get()")
