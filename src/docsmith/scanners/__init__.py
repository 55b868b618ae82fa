"""docsmith scanners - source text to documentation model.

Scanners:
- JavaScanner: Line-oriented Javadoc state machine
- PythonScanner: Docstring extraction via the ``ast`` module
"""

from docsmith.scanners.base import Scanner, ScanError
from docsmith.scanners.java import JavaScanner, ScanState
from docsmith.scanners.python import PythonScanner

__all__ = [
    "JavaScanner",
    "PythonScanner",
    "Scanner",
    "ScanError",
    "ScanState",
    "default_scanners",
]


def default_scanners() -> list[Scanner]:
    """Instantiate every built-in scanner."""
    return [JavaScanner(), PythonScanner()]
