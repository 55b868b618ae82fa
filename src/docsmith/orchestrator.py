"""Documentation orchestrator.

Runs the one-way flow text -> model -> artifact for a batch of source units:

1. Resolve the generator for the requested format (unknown format is fatal,
   before any scanning happens)
2. Scan every unit with the scanner registered for its language; units with
   no scanner, blank units and units that fail to scan are skipped
3. Hand the completed ProjectModel to the generator; any failure here is
   fatal and no artifact is returned

Each call builds its own ProjectModel, so one Orchestrator can serve
concurrent requests.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from docsmith.generators import GenerationError, Generator
from docsmith.models import Artifact, ProjectModel, SourceUnit
from docsmith.registry import Registries

logger = logging.getLogger(__name__)

DEFAULT_PROJECT_NAME = "Generated Documentation"


@dataclass(frozen=True)
class UnitFailure:
    """Source unit whose scan raised an error.

    Attributes:
        file_path: Path of the unit
        language: Language of the unit
        message: Error description
    """

    file_path: str
    language: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"file_path": self.file_path, "language": self.language, "message": self.message}


@dataclass
class GenerationReport:
    """Outcome of the scanning stage.

    Attributes:
        project: Documentation tree built from the scanned units
        skipped: Paths of units that produced no model
        failures: Units whose scan raised an error
    """

    project: ProjectModel
    skipped: list[str] = field(default_factory=list)
    failures: list[UnitFailure] = field(default_factory=list)

    def has_failures(self) -> bool:
        """Check if any unit failed to scan."""
        return bool(self.failures)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "project_name": self.project.project_name,
            "counts": self.project.counts(),
            "skipped": list(self.skipped),
            "failures": [f.to_dict() for f in self.failures],
        }


class Orchestrator:
    """Turns source units into a documentation artifact.

    Usage:
        orchestrator = Orchestrator(build_default_registries())
        artifact = orchestrator.generate(units, "html")
    """

    def __init__(self, registries: Registries, project_name: str = DEFAULT_PROJECT_NAME) -> None:
        """Initialize the orchestrator.

        Args:
            registries: Scanner and generator lookups (shared, read-only)
            project_name: Name given to every generated ProjectModel
        """
        self.registries = registries
        self.project_name = project_name
        logger.debug("Registered scanners: %s", registries.scanners.identifiers())
        logger.debug("Registered generators: %s", registries.generators.identifiers())

    def supported_languages(self) -> list[str]:
        """Get sorted list of languages with a registered scanner."""
        return self.registries.scanners.identifiers()

    def supported_formats(self) -> list[str]:
        """Get sorted list of formats with a registered generator."""
        return self.registries.generators.identifiers()

    def generate(self, units: Iterable[SourceUnit], format: str) -> Artifact:
        """Build the documentation model and render it.

        Args:
            units: Source units in input order
            format: Output format identifier (case-insensitive)

        Returns:
            Artifact produced by the format's generator

        Raises:
            ConfigurationError: If no generator is registered for the format
            GenerationError: If the generator fails
        """
        artifact, _ = self.generate_with_report(units, format)
        return artifact

    def generate_with_report(
        self,
        units: Iterable[SourceUnit],
        format: str,
    ) -> tuple[Artifact, GenerationReport]:
        """Like ``generate``, also returning the scanning report."""
        generator = self.registries.generators.require(format)
        report = self.build_project(units)
        artifact = self._render(generator, report.project)
        return artifact, report

    def build_project(self, units: Iterable[SourceUnit]) -> GenerationReport:
        """Scan units into a ProjectModel without rendering it.

        Args:
            units: Source units in input order

        Returns:
            GenerationReport with the project and per-unit outcomes
        """
        report = GenerationReport(project=ProjectModel(project_name=self.project_name))
        units = list(units)
        logger.info("Scanning %d source unit(s)", len(units))

        for unit in units:
            scanner = self.registries.scanners.get(unit.language)
            if scanner is None:
                logger.info("No scanner for language %s, skipping %s", unit.language, unit.path)
                report.skipped.append(unit.path)
                continue

            try:
                file_model = scanner.scan(unit)
            except Exception as e:
                logger.warning("Failed to scan %s: %s", unit.path, e)
                report.failures.append(
                    UnitFailure(file_path=unit.path, language=unit.language or "", message=str(e))
                )
                continue

            if file_model is None:
                logger.debug("No model produced for %s", unit.path)
                report.skipped.append(unit.path)
                continue

            report.project.add_file(file_model)

        counts = report.project.counts()
        logger.info(
            "Built documentation model: %d file(s), %d class(es), %d method(s)",
            counts["files"],
            counts["classes"],
            counts["methods"],
        )
        return report

    def _render(self, generator: Generator, project: ProjectModel) -> Artifact:
        logger.info("Generating %s documentation", generator.format_name)
        try:
            artifact = generator.generate(project)
        except GenerationError:
            raise
        except Exception as e:
            logger.error("Generator %s failed: %s", generator.format_name, e)
            raise GenerationError(generator.format_name, str(e)) from e

        logger.info("Generation complete for format: %s", generator.format_name)
        return artifact
