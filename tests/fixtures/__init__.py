"""Test fixtures for docsmith.

Sample Sources:
- sample_sources/com/acme: Java classes with Javadoc comments
- sample_sources/util: Python module with epydoc-style docstrings
- sample_sources/notes.txt: File no scanner handles

Expected totals for the whole sample tree: 3 documented files, 4 classes,
5 fields, 4 methods and 3 parameters.
"""

from pathlib import Path

# Path to fixtures directory
FIXTURES_DIR = Path(__file__).parent

# Sample source tree
SAMPLE_SOURCES_DIR = FIXTURES_DIR / "sample_sources"

# Specific sample files
CALCULATOR_JAVA = SAMPLE_SOURCES_DIR / "com" / "acme" / "Calculator.java"
SHAPE_JAVA = SAMPLE_SOURCES_DIR / "com" / "acme" / "Shape.java"
INVENTORY_PY = SAMPLE_SOURCES_DIR / "util" / "inventory.py"

EXPECTED_COUNTS = {
    "files": 3,
    "classes": 4,
    "fields": 5,
    "methods": 4,
    "parameters": 3,
}


def get_sample_source(relative: str) -> Path:
    """Get path to a sample source file.

    Args:
        relative: Path relative to the sample source tree

    Returns:
        Path to the sample file

    Raises:
        ValueError: If the file doesn't exist
    """
    path = SAMPLE_SOURCES_DIR / relative
    if not path.exists():
        raise ValueError(f"Sample source not found: {relative}")
    return path
