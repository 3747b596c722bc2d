"""
Base Command Class
Console commands operating on views and their compiled artifacts
"""
from abc import ABC, abstractmethod
from typing import Iterable, Optional, Sequence

from laraview.logging import getLogger

# Output prefix per message style
PREFIXES = {
    'info': 'ℹ',
    'success': '✅',
    'error': '❌',
    'warning': '⚠',
}


class Command(ABC):
    """
    Console command

    Options given as --key=value reach handle() as keyword arguments;
    handle() returns the exit code.
    """

    # Command name (e.g., "view:cache")
    name: str = ""

    description: str = ""

    # Usage line shown by help and on missing options
    signature: Optional[str] = None

    def __init__(self):
        self.signature = self.signature or self.name
        self.logger = getLogger(f"console.{self.name}")

    @abstractmethod
    async def handle(self, *args, **kwargs) -> int:
        pass

    def require(self, **options) -> bool:
        """Report missing options, True when every one has a value"""
        missing = [f"--{key}" for key, value in options.items() if not value]

        if not missing:
            return True

        self.error(f"Missing required option(s): {', '.join(missing)}")
        self.line(f"Usage: laraview {self.signature}")
        return False

    def write(self, style: str, message: str):
        print(f"{PREFIXES[style]} {message}")

    def info(self, message: str):
        self.write('info', message)

    def success(self, message: str):
        self.write('success', message)

    def error(self, message: str):
        self.write('error', message)

    def warning(self, message: str):
        self.write('warning', message)

    def line(self, message: str = ""):
        print(message)

    def table(self, headers: Sequence[str], rows: Iterable[Sequence]):
        """Print rows as a pipe separated table"""
        rows = [[str(cell) for cell in row] for row in rows]
        widths = [max(len(cell) for cell in column) for column in zip(headers, *rows)]

        header = " | ".join(title.ljust(width) for title, width in zip(headers, widths))
        self.line(header)
        self.line("-" * len(header))

        for row in rows:
            self.line(" | ".join(cell.ljust(width) for cell, width in zip(row, widths)))
