"""Linked document set generator: HTML pages rendered with Jinja2.

Writes into a fresh directory per generation:
- index.html: project overview linking every documented file
- <page_key>.html: one page per file that declares at least one class; keys
  that collide with each other or with index.html get a "-2", "-3" suffix
- css/style.css: stylesheet shared by all pages
"""

import logging
import tempfile
import uuid
from importlib import resources
from pathlib import Path
from typing import Any

from jinja2 import Environment, PackageLoader, TemplateError, select_autoescape

from docsmith.generators.base import GenerationError, Generator
from docsmith.models import DocumentSetArtifact, FileModel, ProjectModel
from docsmith.renderers.filters import page_key, register_filters

logger = logging.getLogger(__name__)

INDEX_PAGE = "index.html"
STYLESHEET = "css/style.css"
DEFAULT_OUTPUT_DIR = Path(tempfile.gettempdir()) / "docsmith-html"


def assign_page_names(files: list[FileModel]) -> list[str | None]:
    """Choose a distinct page file name for every file that declares classes.

    Names are compared case-insensitively and never reuse ``index.html``
    or the stylesheet path.

    Args:
        files: Files in project order

    Returns:
        Page name per file, aligned with ``files``; None for files without classes
    """
    taken = {INDEX_PAGE.lower(), STYLESHEET.lower()}
    names: list[str | None] = []
    for file_model in files:
        if not file_model.has_classes:
            names.append(None)
            continue
        key = page_key(file_model.file_path)
        name = f"{key}.html"
        suffix = 2
        while name.lower() in taken:
            name = f"{key}-{suffix}.html"
            suffix += 1
        taken.add(name.lower())
        names.append(name)
    return names


class HtmlGenerator(Generator):
    """Renders the documentation tree as a set of linked HTML pages.

    Usage:
        generator = HtmlGenerator(output_dir=Path("site"))
        artifact = generator.generate(project)
        artifact.entry_path  # site/<run-id>/index.html
    """

    format_name = "html"

    def __init__(
        self,
        output_dir: Path | None = None,
        stylesheet: Path | None = None,
    ) -> None:
        """Initialize the HTML generator.

        Args:
            output_dir: Base directory; each run writes to a new sub-directory
            stylesheet: CSS file replacing the bundled stylesheet
        """
        self.output_dir = output_dir or DEFAULT_OUTPUT_DIR
        self.stylesheet = stylesheet

        self._env = Environment(
            loader=PackageLoader("docsmith", "templates"),
            autoescape=select_autoescape(["html", "html.j2"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        register_filters(self._env)

    def generate(self, project: ProjectModel) -> DocumentSetArtifact:
        try:
            pages = self.render_pages(project)
        except TemplateError as e:
            logger.error("Template rendering failed: %s", e)
            raise GenerationError(self.format_name, f"Template rendering failed: {e}") from e

        root = self.output_dir / uuid.uuid4().hex
        try:
            pages[STYLESHEET] = self._stylesheet_text()
            for relative, content in pages.items():
                target = root / relative
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text(content, encoding="utf-8")
        except OSError as e:
            logger.error("Failed to write HTML documentation to %s: %s", root, e)
            raise GenerationError(self.format_name, f"Cannot write {root}: {e}") from e

        logger.info("Wrote %d HTML file(s) to %s", len(pages), root)
        return DocumentSetArtifact(
            format=self.format_name,
            root=root,
            entry=INDEX_PAGE,
            files=tuple(pages),
        )

    def render_pages(self, project: ProjectModel) -> dict[str, str]:
        """Render every page without touching the filesystem.

        Args:
            project: Documentation tree

        Returns:
            Relative file name to HTML content, index first
        """
        page_names = assign_page_names(project.files)
        pages = {
            INDEX_PAGE: self._render(
                "index.html.j2",
                {
                    "project": project,
                    "counts": project.counts(),
                    "page_names": page_names,
                    "stylesheet": STYLESHEET,
                },
            )
        }

        for file_model, name in zip(project.files, page_names):
            if name is None:
                continue
            pages[name] = self._render(
                "file.html.j2",
                {"project": project, "file": file_model, "stylesheet": STYLESHEET},
            )
            logger.debug("Rendered file page %s", name)

        return pages

    def _render(self, template_name: str, context: dict[str, Any]) -> str:
        template = self._env.get_template(template_name)
        return template.render(**context)

    def _stylesheet_text(self) -> str:
        if self.stylesheet is not None:
            return self.stylesheet.read_text(encoding="utf-8")
        return (
            resources.files("docsmith")
            .joinpath("templates", "style.css")
            .read_text(encoding="utf-8")
        )

    def get_metadata(self) -> dict[str, Any]:
        """Get generator metadata for logging and debugging."""
        metadata = super().get_metadata()
        metadata["output_dir"] = str(self.output_dir)
        metadata["stylesheet"] = str(self.stylesheet) if self.stylesheet else None
        return metadata
