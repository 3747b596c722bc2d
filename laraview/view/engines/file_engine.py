"""
File Engine
Raw pass-through engine for static views (plain html, css)
"""
from typing import Any, Dict

from laraview.filesystem import Filesystem
from laraview.view.engines.engine import Engine


class FileEngine(Engine):
    """Returns the file contents without evaluating them"""

    def __init__(self, files: Filesystem):
        self.files = files

    def get(self, path: str, data: Dict[str, Any]) -> str:
        return self.files.read(path)
