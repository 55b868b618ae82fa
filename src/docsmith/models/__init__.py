"""docsmith data models.

This module exports the core entities used throughout the application:
- SourceUnit: One input file with its detected language
- DocumentationBlock: Parsed documentation comment (description + tags)
- ProjectModel / FileModel / ClassModel / FieldModel / MethodModel / ParameterModel:
  the documentation tree
- TextArtifact / DocumentSetArtifact / BinaryArtifact: generator outputs
"""

from docsmith.models.artifact import (
    Artifact,
    BinaryArtifact,
    DocumentSetArtifact,
    TextArtifact,
)
from docsmith.models.documentation import (
    ClassKind,
    ClassModel,
    DocumentationBlock,
    FieldModel,
    FileModel,
    MethodModel,
    ParameterModel,
    ProjectModel,
    normalize_comment,
    parse_comment,
)
from docsmith.models.source import (
    EXTENSION_TO_LANGUAGE,
    UNKNOWN_LANGUAGE,
    SourceUnit,
    detect_language,
)

__all__ = [
    # Input
    "SourceUnit",
    "detect_language",
    "EXTENSION_TO_LANGUAGE",
    "UNKNOWN_LANGUAGE",
    # Documentation tree
    "DocumentationBlock",
    "normalize_comment",
    "parse_comment",
    "ParameterModel",
    "FieldModel",
    "MethodModel",
    "ClassKind",
    "ClassModel",
    "FileModel",
    "ProjectModel",
    # Output
    "Artifact",
    "TextArtifact",
    "DocumentSetArtifact",
    "BinaryArtifact",
]
