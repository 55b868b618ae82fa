"""Generator output shapes.

Each generator returns exactly one of these artifact variants:
- TextArtifact: a single structured-text payload
- DocumentSetArtifact: a directory of linked documents with one entry page
- BinaryArtifact: a binary document payload
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class TextArtifact:
    """Structured text payload.

    Attributes:
        format: Format identifier that produced it
        content: Serialized text
        media_type: MIME type of the content
    """

    format: str
    content: str
    media_type: str = "text/plain"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"format": self.format, "media_type": self.media_type, "length": len(self.content)}


@dataclass(frozen=True)
class DocumentSetArtifact:
    """Linked document set written under a root directory.

    Every path in ``files`` is relative to ``root`` and exists on disk.

    Attributes:
        format: Format identifier that produced it
        root: Directory containing the documents
        entry: Relative path of the entry document
        files: Relative paths of every written file
    """

    format: str
    root: Path
    entry: str
    files: tuple[str, ...] = field(default_factory=tuple)

    @property
    def entry_path(self) -> Path:
        return self.root / self.entry

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "format": self.format,
            "root": str(self.root),
            "entry": self.entry,
            "files": list(self.files),
        }


@dataclass(frozen=True)
class BinaryArtifact:
    """Binary document payload.

    Attributes:
        format: Format identifier that produced it
        data: Document bytes
        media_type: MIME type of the data
    """

    format: str
    data: bytes
    media_type: str = "application/octet-stream"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"format": self.format, "media_type": self.media_type, "size": len(self.data)}


Artifact = TextArtifact | DocumentSetArtifact | BinaryArtifact
