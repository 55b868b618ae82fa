"""Paginated binary document generator: PDF via PyMuPDF.

The documentation tree is flattened into labelled text blocks (see
``document_blocks``); PyMuPDF only handles layout: word wrapping, fonts
and page breaks.
"""

import logging
from dataclasses import dataclass

import fitz  # PyMuPDF

from docsmith.generators.base import GenerationError, Generator, walk
from docsmith.models import (
    BinaryArtifact,
    ClassModel,
    DocumentationBlock,
    FieldModel,
    FileModel,
    MethodModel,
    ProjectModel,
)

logger = logging.getLogger(__name__)

EMPTY_PROJECT_TEXT = "No documentation data available."

BODY_FONT = "helv"
LABEL_FONT = "hebo"
LINE_SPACING = 1.4
INDENT = 14.0


@dataclass(frozen=True)
class TextBlock:
    """Labelled paragraph of the PDF.

    Attributes:
        label: Heading line (e.g., "Class: Calculator")
        text: Body text (may be empty)
        depth: Nesting depth used for indentation
    """

    label: str
    text: str = ""
    depth: int = 0


def _doc_text(block: DocumentationBlock | None) -> str:
    if block is None:
        return ""
    lines = [block.description] if block.description else []
    for name, values in block.tags.items():
        if name == "param":
            continue
        lines.extend(f"@{name} {value}".rstrip() for value in values)
    return "\n".join(lines)


def document_blocks(project: ProjectModel) -> list[TextBlock]:
    """Flatten a project into PDF text blocks in tree walk order.

    Args:
        project: Documentation tree

    Returns:
        Blocks starting with the project title
    """
    blocks = [TextBlock(f"Documentation for Project: {project.project_name}")]
    if not project.files:
        blocks.append(TextBlock(EMPTY_PROJECT_TEXT))
        return blocks

    blocks.append(TextBlock(f"Number of files processed: {len(project.files)}"))
    for step in walk(project):
        node = step.node
        if isinstance(node, FileModel):
            label, text = f"File: {node.file_path}", f"Language: {node.language}"
        elif isinstance(node, ClassModel):
            label, text = f"{node.type.capitalize()}: {node.name}", _doc_text(node.documentation)
        elif isinstance(node, FieldModel):
            label, text = f"Field: {node.type} {node.name}", _doc_text(node.documentation)
        elif isinstance(node, MethodModel):
            label = f"Method: {node.name}"
            text = "\n".join(t for t in (node.signature, _doc_text(node.documentation)) if t)
        else:
            label, text = f"Parameter: {node.name}", node.description
        blocks.append(TextBlock(label, text, step.depth))

    return blocks


class _PageWriter:
    """Writes wrapped lines top to bottom, adding pages as they fill."""

    def __init__(
        self, doc: fitz.Document, page_size: str, font_size: float, margin: float
    ) -> None:
        self.doc = doc
        self.width, self.height = fitz.paper_size(page_size)
        self.font_size = font_size
        self.margin = margin
        self.line_height = font_size * LINE_SPACING
        self.page: fitz.Page | None = None
        self.y = 0.0

    def _new_page(self) -> None:
        self.page = self.doc.new_page(width=self.width, height=self.height)
        self.y = self.margin + self.font_size

    def _wrap(self, text: str, font: str, width: float) -> list[str]:
        lines: list[str] = []
        for paragraph in text.splitlines() or [""]:
            current = ""
            for word in paragraph.split():
                candidate = f"{current} {word}" if current else word
                too_wide = (
                    fitz.get_text_length(candidate, fontname=font, fontsize=self.font_size) > width
                )
                if current and too_wide:
                    lines.append(current)
                    current = word
                else:
                    current = candidate
            lines.append(current)
        return lines

    def write(self, text: str, font: str, indent: float) -> None:
        x = self.margin + indent
        width = self.width - x - self.margin
        for line in self._wrap(text, font, width):
            if self.page is None or self.y > self.height - self.margin:
                self._new_page()
            self.page.insert_text((x, self.y), line, fontname=font, fontsize=self.font_size)
            self.y += self.line_height

    def gap(self) -> None:
        self.y += self.line_height / 2


class PdfGenerator(Generator):
    """Renders the documentation tree as a PDF document."""

    format_name = "pdf"

    def __init__(self, page_size: str = "a4", font_size: float = 10, margin: float = 50) -> None:
        """Initialize the PDF generator.

        Args:
            page_size: Paper size name understood by PyMuPDF ("a4", "letter")
            font_size: Body font size in points
            margin: Page margin in points
        """
        self.page_size = page_size
        self.font_size = font_size
        self.margin = margin

    def generate(self, project: ProjectModel) -> BinaryArtifact:
        blocks = document_blocks(project)
        doc = fitz.open()
        try:
            writer = _PageWriter(doc, self.page_size, self.font_size, self.margin)
            for block in blocks:
                indent = block.depth * INDENT
                writer.write(block.label, LABEL_FONT, indent)
                if block.text:
                    writer.write(block.text, BODY_FONT, indent + INDENT)
                writer.gap()
            data = doc.tobytes(garbage=3, deflate=True)
            page_count = doc.page_count
        except (RuntimeError, ValueError) as e:
            logger.error("PDF layout failed: %s", e)
            raise GenerationError(self.format_name, f"PDF layout failed: {e}") from e
        finally:
            doc.close()

        logger.info("Rendered PDF documentation (%d page(s), %d bytes)", page_count, len(data))
        return BinaryArtifact(format=self.format_name, data=data, media_type="application/pdf")
