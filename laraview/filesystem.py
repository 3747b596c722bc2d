"""
Filesystem
Thin file access layer used to read view sources and write compiled views
"""
import hashlib
import os
import tempfile
from pathlib import Path
from typing import List, Union

from laraview.exceptions import FileNotFoundException

PathLike = Union[str, os.PathLike]


class Filesystem:
    """File access used by the view finder, the compiler and the engines"""

    def exists(self, path: PathLike) -> bool:
        return os.path.exists(path)

    def is_file(self, path: PathLike) -> bool:
        return os.path.isfile(path)

    def is_directory(self, path: PathLike) -> bool:
        return os.path.isdir(path)

    def read(self, path: PathLike, encoding: str = 'utf-8') -> str:
        """
        Get the contents of a file

        Raises:
            FileNotFoundException: If the path is not a file
        """
        if not self.is_file(path):
            raise FileNotFoundException(f"File does not exist at path {path}.")

        with open(path, 'r', encoding=encoding) as f:
            return f.read()

    def write(self, path: PathLike, contents: Union[str, bytes]) -> int:
        """
        Write the contents of a file, replacing it atomically

        A reader never observes a half-written file: contents go to a
        temporary file in the same directory which is then renamed.

        Returns:
            Number of bytes written
        """
        data = contents.encode('utf-8') if isinstance(contents, str) else contents
        directory = os.path.dirname(os.path.abspath(path))

        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix='.tmp-')
        try:
            with os.fdopen(fd, 'wb') as f:
                f.write(data)
            os.replace(tmp_path, path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise

        return len(data)

    def last_modified(self, path: PathLike) -> float:
        """Get the file's last modification time"""
        return os.stat(path).st_mtime

    def delete(self, *paths: PathLike) -> bool:
        """Delete the file(s) at the given path(s), True only if all were removed"""
        success = True

        for path in paths:
            try:
                os.unlink(path)
            except OSError:
                success = False

        return success

    def files(self, directory: PathLike, pattern: str = '*') -> List[str]:
        """Get the files directly inside a directory matching a glob pattern"""
        if not self.is_directory(directory):
            return []

        return sorted(str(p) for p in Path(directory).glob(pattern) if p.is_file())

    def all_files(self, directory: PathLike, pattern: str = '*') -> List[str]:
        """Get all files below a directory (recursive) matching a glob pattern"""
        if not self.is_directory(directory):
            return []

        return sorted(str(p) for p in Path(directory).rglob(pattern) if p.is_file())

    def ensure_directory_exists(self, path: PathLike, mode: int = 0o755):
        """Create a directory (and parents) if it does not exist yet"""
        os.makedirs(path, mode=mode, exist_ok=True)

    def hash(self, path: PathLike) -> str:
        """Get the sha1 hash of the file contents"""
        digest = hashlib.sha1()

        with open(path, 'rb') as f:
            for chunk in iter(lambda: f.read(65536), b''):
                digest.update(chunk)

        return digest.hexdigest()
