"""Structured-text generator: the full documentation tree as XML.

Every element and list is written even when empty, so the text can be read
back into an equivalent tree with ``parse_project_xml``.

Element layout::

    <project name>
      <files>
        <file name path language>
          <classes>
            <class name type>
              <documentation> (description, rawText, tags/tag[name])
              <fields><field name type><documentation/></field></fields>
              <methods>
                <method name returnType>
                  <signature/> <return/> <documentation/>
                  <parameters><parameter name>description</parameter></parameters>
"""

import logging
import re
import xml.etree.ElementTree as ET

from docsmith.generators.base import GenerationError, Generator
from docsmith.models import (
    ClassModel,
    DocumentationBlock,
    FieldModel,
    FileModel,
    MethodModel,
    ProjectModel,
    TextArtifact,
)

logger = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'

# Characters that XML 1.0 cannot represent
_INVALID_XML_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")


def _clean(text: str | None) -> str:
    return _INVALID_XML_CHARS.sub("", text or "")


def _add_documentation(parent: ET.Element, block: DocumentationBlock | None) -> None:
    element = ET.SubElement(parent, "documentation")
    if block is None:
        return

    ET.SubElement(element, "description").text = _clean(block.description)
    ET.SubElement(element, "rawText").text = _clean(block.raw_text)
    tags = ET.SubElement(element, "tags")
    for name, values in block.tags.items():
        for value in values:
            ET.SubElement(tags, "tag", name=_clean(name)).text = _clean(value)


def _field_element(parent: ET.Element, field_model: FieldModel) -> None:
    element = ET.SubElement(
        parent, "field", name=_clean(field_model.name), type=_clean(field_model.type)
    )
    _add_documentation(element, field_model.documentation)


def _method_element(parent: ET.Element, method: MethodModel) -> None:
    element = ET.SubElement(
        parent,
        "method",
        name=_clean(method.name),
        returnType=_clean(method.return_type),
    )
    ET.SubElement(element, "signature").text = _clean(method.signature)
    ET.SubElement(element, "return").text = _clean(method.return_description)
    _add_documentation(element, method.documentation)
    parameters = ET.SubElement(element, "parameters")
    for parameter in method.parameters:
        ET.SubElement(parameters, "parameter", name=_clean(parameter.name)).text = _clean(
            parameter.description
        )


def _class_element(parent: ET.Element, cls: ClassModel) -> None:
    element = ET.SubElement(parent, "class", name=_clean(cls.name), type=_clean(cls.type))
    _add_documentation(element, cls.documentation)
    fields = ET.SubElement(element, "fields")
    for field_model in cls.fields:
        _field_element(fields, field_model)
    methods = ET.SubElement(element, "methods")
    for method in cls.methods:
        _method_element(methods, method)


def project_to_element(project: ProjectModel) -> ET.Element:
    """Build the XML element tree for a project."""
    root = ET.Element("project", name=_clean(project.project_name))
    files = ET.SubElement(root, "files")
    for file_model in project.files:
        element = ET.SubElement(
            files,
            "file",
            name=_clean(file_model.file_name),
            path=_clean(file_model.file_path),
            language=_clean(file_model.language),
        )
        classes = ET.SubElement(element, "classes")
        for cls in file_model.classes:
            _class_element(classes, cls)
    return root


def render_project_xml(project: ProjectModel) -> str:
    """Serialize a project to indented XML text."""
    root = project_to_element(project)
    ET.indent(root, space="  ")
    return XML_DECLARATION + ET.tostring(root, encoding="unicode") + "\n"


# =============================================================================
# Reading back
# =============================================================================


def _read_documentation(element: ET.Element | None) -> DocumentationBlock | None:
    if element is None:
        return None
    raw = element.find("rawText")
    if raw is None:
        return None
    return DocumentationBlock(raw.text or "")


def parse_project_xml(text: str) -> ProjectModel:
    """Rebuild a ProjectModel from ``render_project_xml`` output.

    Parameters are re-derived from each method's documentation block.

    Args:
        text: XML document text

    Returns:
        Reconstructed ProjectModel

    Raises:
        ValueError: If the text is not a project document
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise ValueError(f"Invalid project XML: {e}") from e

    if root.tag != "project":
        raise ValueError(f"Expected <project> root element, found <{root.tag}>")

    project = ProjectModel(project_name=root.get("name", ""))
    for file_el in root.iterfind("files/file"):
        file_model = FileModel(
            file_name=file_el.get("name", ""),
            file_path=file_el.get("path", ""),
            language=file_el.get("language", ""),
        )
        for class_el in file_el.iterfind("classes/class"):
            cls = ClassModel(
                name=class_el.get("name", ""),
                type=class_el.get("type", ""),
                documentation=_read_documentation(class_el.find("documentation")),
            )
            for field_el in class_el.iterfind("fields/field"):
                cls.add_field(
                    FieldModel(
                        name=field_el.get("name", ""),
                        type=field_el.get("type", ""),
                        documentation=_read_documentation(field_el.find("documentation")),
                    )
                )
            for method_el in class_el.iterfind("methods/method"):
                cls.add_method(
                    MethodModel(
                        name=method_el.get("name", ""),
                        signature=method_el.findtext("signature", default=""),
                        return_type=method_el.get("returnType", ""),
                        documentation=_read_documentation(method_el.find("documentation")),
                    )
                )
            file_model.add_class(cls)
        project.add_file(file_model)

    return project


class XmlGenerator(Generator):
    """Renders the documentation tree as a single XML document."""

    format_name = "xml"

    def generate(self, project: ProjectModel) -> TextArtifact:
        try:
            content = render_project_xml(project)
        except (TypeError, ValueError) as e:
            raise GenerationError(self.format_name, str(e)) from e

        logger.info("Rendered XML documentation (%d characters)", len(content))
        return TextArtifact(format=self.format_name, content=content, media_type="application/xml")
