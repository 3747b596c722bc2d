"""Test helpers."""

import os
import time


def touch_future(path) -> None:
    """Move a file's modification time into the future."""
    future = time.time() + 60
    os.utime(path, (future, future))
