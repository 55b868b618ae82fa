"""Line-oriented Java documentation scanner.

Recognizes Javadoc blocks and the class, method and field declarations that
follow them with one forward pass over the lines. Matching is heuristic:
multi-line declarations, comment markers inside string literals and nested
types are not understood. A documentation block that is not immediately
followed by a declaration is dropped.
"""

import re
from enum import Enum

from docsmith.models import (
    ClassKind,
    ClassModel,
    DocumentationBlock,
    FieldModel,
    FileModel,
    MethodModel,
    SourceUnit,
)
from docsmith.scanners.base import Scanner

DOC_OPEN = "/**"
COMMENT_OPEN = "/*"
COMMENT_CLOSE = "*/"
LINE_COMMENT = "//"

CLASS_PATTERN = re.compile(
    r"\s*(public|protected|private|abstract|final)?\s*"
    r"(class|interface|enum|@interface)\s+([a-zA-Z0-9_]+)"
)
METHOD_PATTERN = re.compile(
    r"\s*(public|protected|private|static|final|abstract|synchronized)?\s+"
    r"([^\s]+)\s+([a-zA-Z0-9_]+)\s*\([^)]*\)\s*(\{|;)"
)
FIELD_PATTERN = re.compile(
    r"\s*(public|protected|private|static|final|transient|volatile)?\s+"
    r"([^\s]+)\s+([a-zA-Z0-9_]+)\s*(=[^;]*)?;"
)

# Lines that separate a documentation block from any declaration
SEPARATOR_LINES = frozenset({"", "{", "}", ";"})

KEYWORD_TO_KIND: dict[str, str] = {
    "class": ClassKind.CLASS.value,
    "interface": ClassKind.INTERFACE.value,
    "enum": ClassKind.ENUM.value,
    "@interface": ClassKind.ANNOTATION.value,
}


class ScanState(Enum):
    """Scanner states."""

    NORMAL = "normal"
    IN_DOC_BLOCK = "in_doc_block"
    IN_PLAIN_COMMENT = "in_plain_comment"


class _ScanContext:
    """Mutable state of one scan."""

    def __init__(self, file_model: FileModel) -> None:
        self.file_model = file_model
        self.state = ScanState.NORMAL
        self.doc_lines: list[str] = []
        self.pending: DocumentationBlock | None = None
        self.current_class: ClassModel | None = None

    def take_pending(self) -> DocumentationBlock | None:
        block, self.pending = self.pending, None
        return block

    def finish_block(self) -> None:
        self.pending = DocumentationBlock("\n".join(self.doc_lines))
        self.doc_lines = []
        self.state = ScanState.NORMAL


class JavaScanner(Scanner):
    """Javadoc scanner for Java sources."""

    language = "java"

    def _scan(self, unit: SourceUnit) -> FileModel:
        ctx = _ScanContext(FileModel(unit.name, unit.path, self.language))

        for line in unit.content.splitlines():
            stripped = line.strip()
            if ctx.state is ScanState.IN_DOC_BLOCK:
                self._doc_line(ctx, stripped)
            elif ctx.state is ScanState.IN_PLAIN_COMMENT:
                if stripped.endswith(COMMENT_CLOSE):
                    ctx.state = ScanState.NORMAL
            else:
                self._code_line(ctx, stripped)

        return ctx.file_model

    def _doc_line(self, ctx: _ScanContext, stripped: str) -> None:
        if stripped.endswith(COMMENT_CLOSE):
            ctx.doc_lines.append(_strip_marker(stripped[: -len(COMMENT_CLOSE)]))
            ctx.finish_block()
        else:
            ctx.doc_lines.append(_strip_marker(stripped))

    def _code_line(self, ctx: _ScanContext, stripped: str) -> None:
        if stripped.startswith(DOC_OPEN) and not stripped.startswith("/**/"):
            ctx.state = ScanState.IN_DOC_BLOCK
            ctx.doc_lines = []
            remainder = stripped[len(DOC_OPEN) :]
            # A one-line block closes on its opening line
            if remainder.endswith(COMMENT_CLOSE):
                ctx.doc_lines.append(remainder[: -len(COMMENT_CLOSE)].strip())
                ctx.finish_block()
            else:
                ctx.doc_lines.append(remainder.strip())
            return

        if stripped.startswith(COMMENT_OPEN):
            if not stripped.endswith(COMMENT_CLOSE) or stripped == COMMENT_OPEN + "/":
                ctx.state = ScanState.IN_PLAIN_COMMENT
            return

        if stripped.startswith(LINE_COMMENT):
            return

        if stripped in SEPARATOR_LINES:
            ctx.pending = None
            return

        match = CLASS_PATTERN.search(stripped)
        if match:
            keyword = match.group(2)
            cls = ClassModel(
                name=match.group(3),
                type=KEYWORD_TO_KIND.get(keyword, keyword),
                documentation=ctx.take_pending(),
            )
            ctx.file_model.add_class(cls)
            ctx.current_class = cls
            return

        if ctx.current_class is not None:
            match = METHOD_PATTERN.search(stripped)
            if match:
                method = MethodModel(
                    name=match.group(3),
                    signature=stripped,
                    return_type=match.group(2),
                    documentation=ctx.take_pending(),
                )
                ctx.current_class.add_method(method)
                return

            match = FIELD_PATTERN.search(stripped)
            if match:
                ctx.current_class.add_field(
                    FieldModel(
                        name=match.group(3),
                        type=match.group(2),
                        documentation=ctx.take_pending(),
                    )
                )
                return

        ctx.pending = None


def _strip_marker(text: str) -> str:
    """Remove one leading ``*`` and surrounding whitespace from a block line."""
    text = text.strip()
    if text.startswith("*"):
        text = text[1:]
    return text.strip()
