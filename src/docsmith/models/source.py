"""Source unit entity representing one input file handed to the scanners.

A SourceUnit is immutable. Its language is derived once from the file name
extension; renaming produces a new unit with the language recomputed.
"""

from dataclasses import dataclass, replace

UNKNOWN_LANGUAGE = "unknown"

# Extension (lowercase, without dot) to language identifier
EXTENSION_TO_LANGUAGE: dict[str, str] = {
    "java": "java",
    "py": "python",
    "xml": "xml",
    "html": "html",
    "css": "css",
    "js": "javascript",
    "ts": "typescript",
    "c": "cpp",
    "cpp": "cpp",
    "h": "cpp",
    "hpp": "cpp",
    "cs": "csharp",
}


def detect_language(file_name: str | None) -> str:
    """Determine the language of a file from its extension.

    Args:
        file_name: File name (a path is accepted, only the suffix matters)

    Returns:
        Language identifier, or "unknown" for missing or unmapped extensions
    """
    if not file_name:
        return UNKNOWN_LANGUAGE

    dot = file_name.rfind(".")
    # Dotfiles (".java") and trailing dots ("Main.") carry no extension
    if dot <= 0 or dot == len(file_name) - 1:
        return UNKNOWN_LANGUAGE

    extension = file_name[dot + 1 :].lower()
    return EXTENSION_TO_LANGUAGE.get(extension, UNKNOWN_LANGUAGE)


@dataclass(frozen=True)
class SourceUnit:
    """Single source file to document.

    Attributes:
        name: File name (e.g., "Calculator.java")
        path: Path relative to the input root, POSIX separators
        content: Raw file text
        language: Language identifier; derived from ``name`` when not given
    """

    name: str
    path: str
    content: str
    language: str | None = None

    def __post_init__(self) -> None:
        """Derive the language from the file name unless the caller supplied one."""
        if self.language is None:
            object.__setattr__(self, "language", detect_language(self.name))

    def renamed(self, name: str) -> "SourceUnit":
        """Return a copy with a new name and a recomputed language."""
        return replace(self, name=name, language=None)

    @property
    def is_blank(self) -> bool:
        """Return True if the content is empty or whitespace-only."""
        return not self.content or not self.content.strip()

    def __repr__(self) -> str:
        return f"SourceUnit(name={self.name!r}, path={self.path!r}, language={self.language!r})"
