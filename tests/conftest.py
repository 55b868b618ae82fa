"""Shared pytest fixtures for docsmith tests.

Fixtures are organized by category:
- Path fixtures: Sample source locations
- Source fixtures: Ready-made SourceUnits for the scanners
- Model fixtures: Pre-built documentation trees for the generators
"""

import logging
from pathlib import Path

import pytest

from docsmith.models import (
    ClassModel,
    DocumentationBlock,
    FieldModel,
    FileModel,
    MethodModel,
    ProjectModel,
    SourceUnit,
)
from docsmith.registry import Registries, build_default_registries
from docsmith.utils.logging import get_logger

# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(autouse=True)
def reset_docsmith_logging():
    """Detach handlers installed by a test (CLI runs bind them to temporary streams)."""
    yield
    logger = get_logger()
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


# =============================================================================
# Path Fixtures
# =============================================================================


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_sources_dir(fixtures_dir: Path) -> Path:
    """Return the path to the sample source tree."""
    return fixtures_dir / "sample_sources"


# =============================================================================
# Source Fixtures
# =============================================================================

ADD_METHOD_SOURCE = """\
public class Calculator {
    /**
     * Adds two integers.
     * @param a first operand
     * @param b second operand
     * @return the sum
     */
    public int add(int a, int b) {
        return Integer.sum(a, b);
    }
}
"""


@pytest.fixture
def java_unit() -> SourceUnit:
    """Return a Java unit declaring one documented method."""
    return SourceUnit(
        name="Calculator.java", path="com/acme/Calculator.java", content=ADD_METHOD_SOURCE
    )


@pytest.fixture
def python_unit() -> SourceUnit:
    """Return a Python unit declaring one documented class."""
    content = '''\
class Greeter:
    """Says hello.

    @since 1.2
    """

    greeting: str = "hello"

    def greet(self, name: str) -> str:
        """Build a greeting.

        @param name who to greet
        @return the greeting text
        """
        return f"{self.greeting} {name}"
'''
    return SourceUnit(name="greeter.py", path="pkg/greeter.py", content=content)


# =============================================================================
# Model Fixtures
# =============================================================================


@pytest.fixture
def sample_project() -> ProjectModel:
    """Return a small documentation tree built by hand."""
    method = MethodModel(
        name="add",
        signature="public int add(int a, int b) {",
        return_type="int",
        documentation=DocumentationBlock(
            "Adds two integers.\n@param a first operand\n@param b second operand\n@return the sum"
        ),
    )
    cls = ClassModel(
        name="Calculator",
        type="class",
        documentation=DocumentationBlock("Simple calculator.\n@author Jane Doe"),
        fields=[
            FieldModel(
                name="count",
                type="int",
                documentation=DocumentationBlock("Number of operations performed."),
            )
        ],
        methods=[method],
    )
    calculator = FileModel(
        file_name="Calculator.java",
        file_path="com/acme/Calculator.java",
        language="java",
        classes=[cls],
    )
    empty = FileModel(file_name="Empty.java", file_path="com/acme/Empty.java", language="java")
    return ProjectModel(project_name="Acme", files=[calculator, empty])


@pytest.fixture
def empty_project() -> ProjectModel:
    """Return a project without files."""
    return ProjectModel(project_name="Nothing")


@pytest.fixture
def registries(tmp_path: Path) -> Registries:
    """Return default registries writing HTML under a temporary directory."""
    return build_default_registries(html_output_dir=tmp_path / "html")
