"""docsmith CLI interface.

Commands:
- generate: Generate documentation for a file, directory or zip archive
- formats: List supported languages and output formats
- init: Initialize docsmith configuration

Global options:
- --config: Path to configuration file
- --verbose: Enable verbose output with timestamps
- --quiet: Suppress info messages
- --ci: JSON log output
- --version: Show version and exit
"""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer

from docsmith import __version__
from docsmith.config import DocsmithConfig, create_default_config, load_config
from docsmith.generators import GenerationError
from docsmith.models import BinaryArtifact, DocumentSetArtifact, TextArtifact
from docsmith.orchestrator import Orchestrator
from docsmith.registry import ConfigurationError, build_default_registries
from docsmith.sources import load_sources
from docsmith.utils.logging import configure_from_cli, get_logger

# Create Typer app
app = typer.Typer(
    name="docsmith",
    help="API documentation generator for Java and Python sources",
    add_completion=False,
    no_args_is_help=True,
)

# Global state
_config: DocsmithConfig | None = None
_logger = get_logger()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"docsmith {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output with timestamps",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress info messages (warnings and errors only)",
        ),
    ] = False,
    ci: Annotated[
        bool,
        typer.Option(
            "--ci",
            help="Enable CI mode with JSON output",
        ),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """docsmith - API Documentation Generator.

    Extract documentation comments from source code and publish them as
    XML, HTML or PDF.
    """
    global _config

    # Configure logging based on CLI flags
    configure_from_cli(verbose=verbose, quiet=quiet, ci=ci)

    # Load configuration
    try:
        _config = load_config(config_path=config)
        if _config.config_path:
            _logger.debug(f"Loaded config from: {_config.config_path}")
    except FileNotFoundError as e:
        _logger.error(str(e))
        raise typer.Exit(1)
    except Exception as e:
        _logger.error(f"Failed to load config: {e}")
        raise typer.Exit(1)


def _output_file(output: Path, format: str) -> Path:
    """Resolve the file a single-file artifact is written to.

    A path without a suffix, or an existing directory, receives
    ``documentation.<format>``.
    """
    if output.is_dir() or not output.suffix:
        return output / f"documentation.{format}"
    return output


# =============================================================================
# generate command
# =============================================================================


@app.command()
def generate(
    source: Annotated[
        Path,
        typer.Argument(
            help="Source file, directory or .zip archive",
        ),
    ],
    format: Annotated[
        str | None,
        typer.Option(
            "--format",
            "-f",
            help="Output format: xml, html, pdf (overrides config)",
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output file (xml, pdf) or base directory (html) (overrides config)",
        ),
    ] = None,
    name: Annotated[
        str | None,
        typer.Option(
            "--name",
            help="Project name shown in the documentation (overrides config)",
        ),
    ] = None,
) -> None:
    """Generate documentation for a source file, directory or zip archive.

    Exit codes:
        0: Documentation generated successfully
        1: Configuration, input or generation error
        2: Generated, but some files failed to scan
    """
    config = _config or DocsmithConfig()

    output_format = (format or config.output.format).lower()
    output_path = output or Path(config.output.path)
    project_name = name or config.project.name

    _logger.info(f"Output: {output_path} (format: {output_format})")

    # Read input
    try:
        units = load_sources(
            source,
            include=config.project.include,
            exclude=config.project.exclude,
        )
    except (FileNotFoundError, ValueError, OSError) as e:
        _logger.error(f"Cannot read sources: {e}")
        raise typer.Exit(1)

    stylesheet = Path(config.html.stylesheet) if config.html.stylesheet else None
    registries = build_default_registries(
        html_output_dir=output_path,
        html_stylesheet=stylesheet,
        pdf_page_size=config.pdf.page_size,
        pdf_font_size=config.pdf.font_size,
        pdf_margin=config.pdf.margin,
    )
    orchestrator = Orchestrator(registries, project_name=project_name)

    try:
        artifact, report = orchestrator.generate_with_report(units, output_format)
    except ConfigurationError as e:
        _logger.error(str(e))
        raise typer.Exit(1)
    except GenerationError as e:
        _logger.error(str(e))
        raise typer.Exit(1)

    # Write the artifact
    try:
        if isinstance(artifact, DocumentSetArtifact):
            written = artifact.entry_path
        else:
            written = _output_file(output_path, output_format)
            written.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(artifact, TextArtifact):
                written.write_text(artifact.content, encoding="utf-8")
            elif isinstance(artifact, BinaryArtifact):
                written.write_bytes(artifact.data)
    except OSError as e:
        _logger.error(f"Failed to write documentation: {e}")
        raise typer.Exit(1)

    _logger.structured(
        logging.INFO,
        "Generation finished",
        format=output_format,
        output=str(written),
        **report.to_dict(),
    )
    typer.echo(f"Documentation written to: {written}")

    if report.has_failures():
        for failure in report.failures:
            _logger.warning(f"  [{failure.language}] {failure.file_path}: {failure.message}")
        raise typer.Exit(2)
    raise typer.Exit(0)


# =============================================================================
# formats command
# =============================================================================


@app.command()
def formats(
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output results as JSON",
        ),
    ] = False,
) -> None:
    """List the source languages and output formats docsmith supports."""
    metadata = build_default_registries().get_metadata()

    if json_output:
        typer.echo(json.dumps(metadata, indent=2))
        return

    typer.echo("Languages:")
    for language in metadata["languages"]:
        typer.echo(f"  {language}")
    typer.echo("Formats:")
    for output_format in metadata["formats"]:
        typer.echo(f"  {output_format}")


# =============================================================================
# init command
# =============================================================================


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            help="Overwrite existing config",
        ),
    ] = False,
) -> None:
    """Initialize docsmith configuration.

    Creates .docsmith/config.yaml with the default settings.
    """
    config_dir = Path(".docsmith")
    config_file = config_dir / "config.yaml"

    if config_file.exists() and not force:
        _logger.error(f"Config already exists: {config_file}")
        _logger.info("Use --force to overwrite")
        raise typer.Exit(1)

    try:
        config_dir.mkdir(exist_ok=True)
        config_file.write_text(create_default_config(), encoding="utf-8")
    except OSError as e:
        _logger.error(f"Failed to write config: {e}")
        raise typer.Exit(1)

    typer.echo("docsmith configuration initialized")
    typer.echo(f"   Config: {config_file}")
    raise typer.Exit(0)
