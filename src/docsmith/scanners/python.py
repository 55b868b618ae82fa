"""Python docstring scanner.

Uses the standard library ``ast`` module to find top-level classes, their
annotated class attributes and their methods. Docstrings become
documentation blocks, so epydoc-style ``@param`` tags yield parameters.
Module-level functions and nested classes are not modelled.
"""

import ast
import re

from docsmith.models import (
    ClassKind,
    ClassModel,
    DocumentationBlock,
    FieldModel,
    FileModel,
    MethodModel,
    SourceUnit,
)
from docsmith.scanners.base import Scanner, ScanError

# Base class names that change the reported kind of a class
ENUM_BASES = frozenset({"Enum", "IntEnum", "StrEnum", "Flag", "IntFlag"})
INTERFACE_BASES = frozenset({"ABC", "Protocol"})

# Line breaks as the tokenizer counts them; str.splitlines also breaks on \f and others
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def _base_name(node: ast.expr) -> str:
    if isinstance(node, ast.Attribute):
        return node.attr
    if isinstance(node, ast.Subscript):
        return _base_name(node.value)
    if isinstance(node, ast.Name):
        return node.id
    return ""


def _class_kind(node: ast.ClassDef) -> str:
    bases = {_base_name(b) for b in node.bases}
    if bases & ENUM_BASES:
        return ClassKind.ENUM.value
    if bases & INTERFACE_BASES:
        return ClassKind.INTERFACE.value
    return ClassKind.CLASS.value


def _documentation(node: ast.AST) -> DocumentationBlock | None:
    docstring = ast.get_docstring(node, clean=True)  # type: ignore[arg-type]
    return DocumentationBlock(docstring) if docstring else None


class PythonScanner(Scanner):
    """Docstring scanner for Python sources."""

    language = "python"

    def _scan(self, unit: SourceUnit) -> FileModel:
        try:
            tree = ast.parse(unit.content, filename=unit.path)
        except SyntaxError as e:
            raise ScanError(unit.path, e.msg, line=e.lineno) from e

        lines = _LINE_BREAK.split(unit.content)
        file_model = FileModel(unit.name, unit.path, self.language)

        for node in tree.body:
            if isinstance(node, ast.ClassDef):
                file_model.add_class(self._class(node, lines))

        return file_model

    def _class(self, node: ast.ClassDef, lines: list[str]) -> ClassModel:
        cls = ClassModel(
            name=node.name,
            type=_class_kind(node),
            documentation=_documentation(node),
        )

        for item in node.body:
            if isinstance(item, ast.AnnAssign) and isinstance(item.target, ast.Name):
                cls.add_field(FieldModel(item.target.id, ast.unparse(item.annotation)))
            elif isinstance(item, ast.Assign):
                for target in item.targets:
                    if isinstance(target, ast.Name):
                        cls.add_field(FieldModel(target.id, ""))
            elif isinstance(item, (ast.FunctionDef, ast.AsyncFunctionDef)):
                cls.add_method(
                    MethodModel(
                        name=item.name,
                        signature=lines[item.lineno - 1].strip(),
                        return_type=ast.unparse(item.returns) if item.returns else "",
                        documentation=_documentation(item),
                    )
                )

        return cls
