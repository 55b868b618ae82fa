"""Abstract base class for language scanners.

A scanner turns one SourceUnit into a FileModel. Scanners are stateless
between calls, so one instance may serve concurrent requests.
"""

import logging
from abc import ABC, abstractmethod

from docsmith.models import FileModel, SourceUnit

logger = logging.getLogger(__name__)


class Scanner(ABC):
    """Interface for per-language documentation scanners.

    Subclasses set ``language`` and implement ``_scan``. ``scan`` handles the
    skip conditions shared by every scanner.

    Attributes:
        language: Language identifier this scanner handles
    """

    language: str = ""

    def supports(self, unit: SourceUnit) -> bool:
        """Return True if the unit is declared in this scanner's language."""
        return (unit.language or "").lower() == self.language

    def scan(self, unit: SourceUnit) -> FileModel | None:
        """Build a FileModel from a source unit.

        Args:
            unit: Source unit to scan

        Returns:
            Populated FileModel, or None when the unit is blank or is not in
            this scanner's language

        Raises:
            ScanError: If the unit cannot be scanned
        """
        if unit.is_blank:
            logger.debug("%s scanner: %s is empty, skipping", self.language, unit.path)
            return None

        if not self.supports(unit):
            logger.debug(
                "%s scanner: %s is marked as %s, skipping",
                self.language,
                unit.path,
                unit.language,
            )
            return None

        file_model = self._scan(unit)
        logger.debug(
            "%s scanner: %s -> %d class(es)",
            self.language,
            unit.path,
            len(file_model.classes),
        )
        return file_model

    @abstractmethod
    def _scan(self, unit: SourceUnit) -> FileModel:
        """Scan a non-blank unit in this scanner's language."""


class ScanError(Exception):
    """Raised when a scanner fails on a source unit."""

    def __init__(self, file_path: str, message: str, line: int | None = None) -> None:
        self.file_path = file_path
        self.line = line
        full_message = f"Failed to scan {file_path}: {message}"
        if line is not None:
            full_message += f" (line {line})"
        super().__init__(full_message)
