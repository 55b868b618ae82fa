"""Scanner and generator registries.

Registries map an identifier (language or format name) to the handler that
serves it. They are built once from a fixed set of handlers and are
read-only afterwards, so a single instance can be shared by concurrent
orchestrators.

Adding a new scanner or generator:
    1. Implement the Scanner or Generator interface
    2. Pass an instance to build_default_registries (or Registries.build)
    3. No changes needed to the rest of the codebase
"""

from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Generic, TypeVar

from docsmith.generators import Generator, default_generators
from docsmith.scanners import Scanner, default_scanners

H = TypeVar("H")


class ConfigurationError(Exception):
    """Raised for invalid handler configuration.

    Covers a requested format with no generator and duplicate identifiers
    while building a registry.
    """

    def __init__(self, kind: str, identifier: str, message: str | None = None) -> None:
        self.kind = kind
        self.identifier = identifier
        self.message = message or f"No {kind} registered for '{identifier}'"
        super().__init__(self.message)


class HandlerRegistry(Generic[H]):
    """Immutable identifier to handler lookup.

    Identifiers are compared case-insensitively.

    Attributes:
        kind: Handler kind used in error messages ("scanner", "generator")
    """

    def __init__(self, kind: str, handlers: Iterable[H], key: Callable[[H], str]) -> None:
        """Build the lookup table.

        Args:
            kind: Handler kind
            handlers: Handlers to register
            key: Returns the identifier a handler reports for itself

        Raises:
            ConfigurationError: If two handlers report the same identifier
        """
        self.kind = kind
        table: dict[str, H] = {}
        for handler in handlers:
            identifier = key(handler).lower()
            if identifier in table:
                raise ConfigurationError(
                    kind,
                    identifier,
                    f"Duplicate {kind} for '{identifier}': "
                    f"{type(table[identifier]).__name__} and {type(handler).__name__}",
                )
            table[identifier] = handler
        self._handlers: Mapping[str, H] = MappingProxyType(table)

    def get(self, identifier: str | None) -> H | None:
        """Look up a handler; returns None for unknown identifiers."""
        if not identifier:
            return None
        return self._handlers.get(identifier.lower())

    def require(self, identifier: str) -> H:
        """Look up a handler that must exist.

        Raises:
            ConfigurationError: If no handler is registered
        """
        handler = self.get(identifier)
        if handler is None:
            raise ConfigurationError(
                self.kind,
                identifier,
                f"No {self.kind} registered for '{identifier}'. Available: {self.identifiers()}",
            )
        return handler

    def identifiers(self) -> list[str]:
        """Get sorted list of registered identifiers."""
        return sorted(self._handlers)

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and identifier.lower() in self._handlers

    def __iter__(self) -> Iterator[str]:
        return iter(self.identifiers())

    def __len__(self) -> int:
        return len(self._handlers)


@dataclass(frozen=True)
class Registries:
    """Scanner and generator lookups handed to the orchestrator.

    Attributes:
        scanners: Language identifier to scanner
        generators: Format identifier to generator
    """

    scanners: HandlerRegistry[Scanner]
    generators: HandlerRegistry[Generator]

    @classmethod
    def build(
        cls,
        scanners: Iterable[Scanner],
        generators: Iterable[Generator],
    ) -> "Registries":
        """Build both registries from handler instances."""
        return cls(
            scanners=HandlerRegistry("scanner", scanners, key=lambda s: s.language),
            generators=HandlerRegistry("generator", generators, key=lambda g: g.format_name),
        )

    def get_metadata(self) -> dict[str, Any]:
        """Get registry metadata for logging and debugging."""
        return {
            "languages": self.scanners.identifiers(),
            "formats": self.generators.identifiers(),
        }


def build_default_registries(
    html_output_dir: Path | None = None,
    html_stylesheet: Path | None = None,
    pdf_page_size: str = "a4",
    pdf_font_size: float = 10,
    pdf_margin: float = 50,
) -> Registries:
    """Build registries holding every built-in scanner and generator.

    Args:
        html_output_dir: Base directory for HTML document sets
        html_stylesheet: CSS file replacing the bundled stylesheet
        pdf_page_size: Paper size name for PDF output
        pdf_font_size: Body font size for PDF output
        pdf_margin: Page margin in points for PDF output

    Returns:
        Populated Registries
    """
    return Registries.build(
        scanners=default_scanners(),
        generators=default_generators(
            html_output_dir=html_output_dir,
            html_stylesheet=html_stylesheet,
            pdf_page_size=pdf_page_size,
            pdf_font_size=pdf_font_size,
            pdf_margin=pdf_margin,
        ),
    )
