"""Unit tests for scanner and generator registries."""

import pytest

from docsmith.generators import Generator, HtmlGenerator, PdfGenerator, XmlGenerator
from docsmith.models import ProjectModel, TextArtifact
from docsmith.registry import (
    ConfigurationError,
    HandlerRegistry,
    Registries,
    build_default_registries,
)
from docsmith.scanners import JavaScanner, PythonScanner


class UpperXmlGenerator(Generator):
    """Second generator claiming the xml format."""

    format_name = "XML"

    def generate(self, project: ProjectModel) -> TextArtifact:
        return TextArtifact(format="xml", content="")


class TestHandlerRegistry:
    """Tests for HandlerRegistry."""

    @pytest.fixture
    def registry(self) -> HandlerRegistry[JavaScanner]:
        """Create a registry with one scanner."""
        return HandlerRegistry("scanner", [JavaScanner()], key=lambda s: s.language)

    def test_lookup_case_insensitive(self, registry: HandlerRegistry) -> None:
        """Test that identifiers match regardless of case."""
        assert isinstance(registry.get("java"), JavaScanner)
        assert isinstance(registry.get("JAVA"), JavaScanner)
        assert "Java" in registry

    def test_unknown_returns_none(self, registry: HandlerRegistry) -> None:
        """Test that unknown and missing identifiers are absent."""
        assert registry.get("cobol") is None
        assert registry.get(None) is None
        assert registry.get("") is None
        assert "cobol" not in registry

    def test_require_raises_for_unknown(self, registry: HandlerRegistry) -> None:
        """Test that require reports the missing identifier."""
        with pytest.raises(ConfigurationError) as exc_info:
            registry.require("cobol")

        assert exc_info.value.kind == "scanner"
        assert exc_info.value.identifier == "cobol"
        assert "java" in str(exc_info.value)

    def test_duplicate_identifier_raises(self) -> None:
        """Test that two handlers for one identifier are rejected."""
        with pytest.raises(ConfigurationError) as exc_info:
            HandlerRegistry(
                "generator",
                [XmlGenerator(), UpperXmlGenerator()],
                key=lambda g: g.format_name,
            )

        assert exc_info.value.identifier == "xml"
        assert "Duplicate" in str(exc_info.value)

    def test_identifiers_sorted(self) -> None:
        """Test that identifiers are listed in sorted order."""
        registry = HandlerRegistry(
            "scanner", [PythonScanner(), JavaScanner()], key=lambda s: s.language
        )
        assert registry.identifiers() == ["java", "python"]
        assert list(registry) == ["java", "python"]
        assert len(registry) == 2


class TestDefaultRegistries:
    """Tests for build_default_registries."""

    def test_all_builtin_handlers(self, registries: Registries) -> None:
        """Test that every built-in scanner and generator is registered."""
        assert registries.get_metadata() == {
            "languages": ["java", "python"],
            "formats": ["html", "pdf", "xml"],
        }
        assert isinstance(registries.generators.get("html"), HtmlGenerator)
        assert isinstance(registries.generators.get("pdf"), PdfGenerator)

    def test_generator_settings_applied(self, tmp_path) -> None:
        """Test that output settings reach the generators."""
        registries = build_default_registries(
            html_output_dir=tmp_path, pdf_page_size="letter", pdf_font_size=12
        )
        assert registries.generators.require("html").output_dir == tmp_path
        pdf = registries.generators.require("pdf")
        assert (pdf.page_size, pdf.font_size) == ("letter", 12)

    def test_build_rejects_duplicate_scanners(self) -> None:
        """Test that Registries.build validates its handlers."""
        with pytest.raises(ConfigurationError):
            Registries.build(scanners=[JavaScanner(), JavaScanner()], generators=[])
