"""
Logging Backends

- ConsoleBackend / ColorConsoleBackend: console output
- FileBackend: buffered file logging with rotation
"""

from .console import ConsoleBackend, ColorConsoleBackend
from .file import FileBackend

__all__ = [
    'ConsoleBackend',
    'ColorConsoleBackend',
    'FileBackend',
]
