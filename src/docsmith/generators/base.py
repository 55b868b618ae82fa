"""Abstract base class for artifact generators.

A generator is a read-only consumer of a ProjectModel: it must not modify
the tree it is given. Every generator walks the tree in the same order:
files, then each file's classes, then each class's fields followed by its
methods, then each method's parameters.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from docsmith.models import (
    Artifact,
    ClassModel,
    FieldModel,
    FileModel,
    MethodModel,
    ParameterModel,
    ProjectModel,
)

TreeNode = FileModel | ClassModel | FieldModel | MethodModel | ParameterModel


@dataclass(frozen=True)
class WalkStep:
    """One node visited by ``walk``.

    Attributes:
        depth: 0 for files, 1 for classes, 2 for members, 3 for parameters
        node: The visited entity
    """

    depth: int
    node: TreeNode


def walk(project: ProjectModel) -> Iterator[WalkStep]:
    """Visit every entity of a project in generator order."""
    for file_model in project.files:
        yield WalkStep(0, file_model)
        for cls in file_model.classes:
            yield WalkStep(1, cls)
            for field_model in cls.fields:
                yield WalkStep(2, field_model)
            for method in cls.methods:
                yield WalkStep(2, method)
                for parameter in method.parameters:
                    yield WalkStep(3, parameter)


class Generator(ABC):
    """Interface for output format generators.

    Attributes:
        format_name: Format identifier (e.g., "xml", "html", "pdf")
    """

    format_name: str = ""

    @abstractmethod
    def generate(self, project: ProjectModel) -> Artifact:
        """Render a project into this generator's artifact.

        Args:
            project: Completed documentation tree (not modified)

        Returns:
            Format-specific artifact

        Raises:
            GenerationError: If the artifact cannot be produced
        """

    def get_metadata(self) -> dict[str, Any]:
        """Get generator metadata for logging and debugging."""
        return {"format": self.format_name, "generator": type(self).__name__}


class GenerationError(Exception):
    """Raised when a generator cannot produce its artifact."""

    def __init__(self, format_name: str, message: str) -> None:
        self.format_name = format_name
        self.message = message
        super().__init__(f"Generation failed for format '{format_name}': {message}")
