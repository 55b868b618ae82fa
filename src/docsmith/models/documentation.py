"""Documentation model entities.

The model is a strict ownership tree:

    ProjectModel -> FileModel -> ClassModel -> {FieldModel, MethodModel -> ParameterModel}

Fields, methods and classes may own a DocumentationBlock. Entities are plain
accumulators during a scan and are treated as read-only once handed to a
generator. No entity references its owner.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# Tag marker: "@name" at the start of the text or after whitespace, followed by
# whitespace or the end of the text. "{@link X}" and "a@b.c" are not markers.
TAG_MARKER = re.compile(r"(?<!\S)@(?P<name>[A-Za-z0-9_]+)(?=\s|\Z)")

PARAM_TAG = "param"
RETURN_TAG = "return"


def normalize_comment(raw_text: str | None) -> str:
    """Strip comment delimiters and per-line ``*`` markers.

    The first line is only trimmed; every following line loses one leading
    ``*`` and its surrounding whitespace.

    Args:
        raw_text: Comment text, with or without ``/**`` and ``*/``

    Returns:
        Normalized text with lines joined by newlines
    """
    if raw_text is None:
        return ""

    text = raw_text.strip()
    if text.startswith("/**"):
        text = text[3:]
    if text.endswith("*/"):
        text = text[:-2]

    lines = text.splitlines()
    if not lines:
        return ""

    cleaned = [lines[0].strip()]
    for line in lines[1:]:
        line = line.strip()
        if line.startswith("*"):
            line = line[1:].strip()
        cleaned.append(line)

    return "\n".join(cleaned).strip()


def parse_comment(raw_text: str | None) -> tuple[str, dict[str, list[str]]]:
    """Split a comment into its description and tags.

    Any ``@identifier`` token is accepted as a tag. Repeated tags accumulate
    in source order. A tag without a value is recorded with an empty string.

    Args:
        raw_text: Raw comment text

    Returns:
        Tuple of (description, tags)
    """
    text = normalize_comment(raw_text)
    tags: dict[str, list[str]] = {}
    if not text:
        return "", tags

    markers = list(TAG_MARKER.finditer(text))
    if not markers:
        return text, tags

    description = text[: markers[0].start()].strip()
    # Each value runs, across lines, up to the next marker or the end of text
    ends = [m.start() for m in markers[1:]] + [len(text)]
    for marker, end in zip(markers, ends):
        value = text[marker.end() : end].strip()
        tags.setdefault(marker.group("name"), []).append(value)

    return description, tags


class DocumentationBlock:
    """Parsed documentation comment.

    ``description`` and ``tags`` are computed eagerly whenever ``raw_text``
    is assigned, so they always reflect the current raw text.

    Attributes:
        raw_text: Comment body as collected from the source
        description: Text before the first tag, trimmed
        tags: Tag name to values, insertion ordered
    """

    def __init__(self, raw_text: str = "") -> None:
        self.raw_text = raw_text

    @property
    def raw_text(self) -> str:
        return self._raw_text

    @raw_text.setter
    def raw_text(self, value: str | None) -> None:
        self._raw_text = value or ""
        self._description, self._tags = parse_comment(self._raw_text)

    @property
    def description(self) -> str:
        return self._description

    @property
    def tags(self) -> dict[str, list[str]]:
        """Return a copy of the tag mapping."""
        return {name: list(values) for name, values in self._tags.items()}

    def tag_values(self, name: str) -> list[str]:
        """Get all values recorded for a tag, in source order."""
        return list(self._tags.get(name, []))

    def first_tag_value(self, name: str) -> str | None:
        """Get the first value of a tag, or None if the tag is absent."""
        values = self._tags.get(name)
        return values[0] if values else None

    @property
    def return_value(self) -> str | None:
        """First ``@return`` value, or None."""
        return self.first_tag_value(RETURN_TAG)

    def parameters(self) -> list["ParameterModel"]:
        """Derive parameter models from the ``@param`` tags."""
        return [ParameterModel.from_tag_value(v) for v in self._tags.get(PARAM_TAG, [])]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DocumentationBlock):
            return NotImplemented
        return self._raw_text == other._raw_text

    def __repr__(self) -> str:
        return f"DocumentationBlock(description={self._description!r}, tags={self._tags!r})"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "raw_text": self._raw_text,
            "description": self._description,
            "tags": self.tags,
        }


@dataclass(frozen=True)
class ParameterModel:
    """Documented method parameter.

    Attributes:
        name: Parameter name
        description: Parameter description (may be empty)
    """

    name: str
    description: str = ""

    @classmethod
    def from_tag_value(cls, value: str) -> "ParameterModel":
        """Split a ``@param`` value at its first whitespace run."""
        parts = value.strip().split(None, 1)
        if not parts:
            return cls(name="")
        if len(parts) == 1:
            return cls(name=parts[0])
        return cls(name=parts[0], description=parts[1].strip())

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"name": self.name, "description": self.description}


class ClassKind(Enum):
    """Known kinds of type declarations."""

    CLASS = "class"
    INTERFACE = "interface"
    ENUM = "enum"
    ANNOTATION = "annotation"


@dataclass
class FieldModel:
    """Field declared in a class.

    Attributes:
        name: Field name
        type: Declared type text
        documentation: Attached documentation block
    """

    name: str
    type: str
    documentation: DocumentationBlock | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "type": self.type,
            "documentation": self.documentation.to_dict() if self.documentation else None,
        }


class MethodModel:
    """Method declared in a class.

    ``parameters`` is derived from the attached documentation block and is
    replaced wholesale whenever a block is attached.

    Attributes:
        name: Method name
        signature: Declaration text as found in the source
        return_type: Declared return type text
    """

    def __init__(
        self,
        name: str,
        signature: str,
        return_type: str,
        documentation: DocumentationBlock | None = None,
    ) -> None:
        self.name = name
        self.signature = signature
        self.return_type = return_type
        self._documentation: DocumentationBlock | None = None
        self._parameters: list[ParameterModel] = []
        if documentation is not None:
            self.documentation = documentation

    @property
    def documentation(self) -> DocumentationBlock | None:
        return self._documentation

    @documentation.setter
    def documentation(self, block: DocumentationBlock | None) -> None:
        self._documentation = block
        self._parameters = block.parameters() if block is not None else []

    @property
    def parameters(self) -> list[ParameterModel]:
        return list(self._parameters)

    @property
    def return_description(self) -> str | None:
        """Value of the ``@return`` tag, if documented."""
        return self._documentation.return_value if self._documentation else None

    def __repr__(self) -> str:
        return f"MethodModel(name={self.name!r}, return_type={self.return_type!r})"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "signature": self.signature,
            "return_type": self.return_type,
            "documentation": self._documentation.to_dict() if self._documentation else None,
            "parameters": [p.to_dict() for p in self._parameters],
        }


@dataclass
class ClassModel:
    """Type declaration with its members.

    Attributes:
        name: Type name
        type: Kind of declaration (see ClassKind, open-ended)
        documentation: Attached documentation block
        fields: Declared fields in source order
        methods: Declared methods in source order
    """

    name: str
    type: str = ClassKind.CLASS.value
    documentation: DocumentationBlock | None = None
    fields: list[FieldModel] = field(default_factory=list)
    methods: list[MethodModel] = field(default_factory=list)

    def add_field(self, field_model: FieldModel) -> None:
        """Add a field to the class."""
        self.fields.append(field_model)

    def add_method(self, method: MethodModel) -> None:
        """Add a method to the class."""
        self.methods.append(method)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "type": self.type,
            "documentation": self.documentation.to_dict() if self.documentation else None,
            "fields": [f.to_dict() for f in self.fields],
            "methods": [m.to_dict() for m in self.methods],
        }


@dataclass
class FileModel:
    """Documented source file.

    Attributes:
        file_name: File name
        file_path: Path relative to the input root
        language: Language identifier of the scanner that produced it
        classes: Declared types in source order
    """

    file_name: str
    file_path: str
    language: str
    classes: list[ClassModel] = field(default_factory=list)

    def add_class(self, cls: ClassModel) -> None:
        """Add a class to the file."""
        self.classes.append(cls)

    @property
    def has_classes(self) -> bool:
        return bool(self.classes)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "file_name": self.file_name,
            "file_path": self.file_path,
            "language": self.language,
            "classes": [c.to_dict() for c in self.classes],
        }


@dataclass
class ProjectModel:
    """Root of the documentation tree.

    Attributes:
        project_name: Display name of the project
        files: Documented files in input order
    """

    project_name: str
    files: list[FileModel] = field(default_factory=list)

    def add_file(self, file_model: FileModel) -> None:
        """Add a file to the project."""
        self.files.append(file_model)

    def counts(self) -> dict[str, int]:
        """Count entities at every level of the tree."""
        classes = [c for f in self.files for c in f.classes]
        methods = [m for c in classes for m in c.methods]
        return {
            "files": len(self.files),
            "classes": len(classes),
            "fields": sum(len(c.fields) for c in classes),
            "methods": len(methods),
            "parameters": sum(len(m.parameters) for m in methods),
        }

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "project_name": self.project_name,
            "files": [f.to_dict() for f in self.files],
        }
