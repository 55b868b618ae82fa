"""docsmith generators - documentation model to output artifact.

Generators:
- XmlGenerator ("xml"): full tree as one structured-text document
- HtmlGenerator ("html"): linked HTML document set
- PdfGenerator ("pdf"): paginated PDF document
"""

from pathlib import Path

from docsmith.generators.base import GenerationError, Generator, WalkStep, walk
from docsmith.generators.html import HtmlGenerator
from docsmith.generators.pdf import PdfGenerator, document_blocks
from docsmith.generators.xml import XmlGenerator, parse_project_xml, render_project_xml

__all__ = [
    "GenerationError",
    "Generator",
    "HtmlGenerator",
    "PdfGenerator",
    "WalkStep",
    "XmlGenerator",
    "default_generators",
    "document_blocks",
    "parse_project_xml",
    "render_project_xml",
    "walk",
]


def default_generators(
    html_output_dir: Path | None = None,
    html_stylesheet: Path | None = None,
    pdf_page_size: str = "a4",
    pdf_font_size: float = 10,
    pdf_margin: float = 50,
) -> list[Generator]:
    """Instantiate every built-in generator.

    Args:
        html_output_dir: Base directory for HTML document sets
        html_stylesheet: CSS file replacing the bundled stylesheet
        pdf_page_size: Paper size name for PDF output
        pdf_font_size: Body font size for PDF output
        pdf_margin: Page margin in points for PDF output

    Returns:
        One instance per output format
    """
    return [
        XmlGenerator(),
        HtmlGenerator(output_dir=html_output_dir, stylesheet=html_stylesheet),
        PdfGenerator(page_size=pdf_page_size, font_size=pdf_font_size, margin=pdf_margin),
    ]
