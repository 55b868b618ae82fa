"""docsmith configuration system.

Configuration is YAML-based with a few CLI overrides (--format, --output, --name).
Supports environment variable substitution (${VAR}) in config files.

Configuration file discovery (in priority order):
1. CLI --config argument
2. ./.docsmith/config.yaml
3. ./docsmith.yaml
"""

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

VALID_PAGE_SIZES = frozenset({"a4", "letter"})

DEFAULT_EXCLUDES = [".git/*", "node_modules/*", "target/*", "build/*"]

# =============================================================================
# Configuration Dataclasses
# =============================================================================


@dataclass
class ProjectConfig:
    """Project and input selection.

    Attributes:
        name: Project name shown in generated documentation
        include: Glob patterns of files to read (empty means all files)
        exclude: Glob patterns of files to skip
    """

    name: str = "Generated Documentation"
    include: list[str] = field(default_factory=list)
    exclude: list[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDES))


@dataclass
class OutputConfig:
    """Output configuration.

    Attributes:
        path: Output file (xml, pdf) or base directory (html)
        format: Output format, resolved against the registered generators at run time
    """

    path: str = "docs"
    format: str = "html"

    def __post_init__(self) -> None:
        """Normalize output configuration."""
        self.format = self.format.lower()


@dataclass
class HtmlConfig:
    """HTML document set settings.

    Attributes:
        stylesheet: CSS file replacing the bundled stylesheet
    """

    stylesheet: str | None = None


@dataclass
class PdfConfig:
    """PDF layout settings.

    Attributes:
        page_size: Paper size (a4, letter)
        font_size: Body font size in points
        margin: Page margin in points
    """

    page_size: str = "a4"
    font_size: float = 10
    margin: float = 50

    def __post_init__(self) -> None:
        """Validate PDF configuration."""
        self.page_size = self.page_size.lower()
        if self.page_size not in VALID_PAGE_SIZES:
            raise ValueError(
                f"Invalid page size: {self.page_size}. Valid: {sorted(VALID_PAGE_SIZES)}"
            )
        if self.font_size <= 0:
            raise ValueError(f"PDF font size must be positive (got {self.font_size})")
        if self.margin < 0:
            raise ValueError(f"PDF margin must not be negative (got {self.margin})")


@dataclass
class DocsmithConfig:
    """Top-level docsmith configuration.

    Attributes:
        project: Project name and input selection
        output: Output path and format
        html: HTML settings
        pdf: PDF settings
    """

    project: ProjectConfig = field(default_factory=ProjectConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    html: HtmlConfig = field(default_factory=HtmlConfig)
    pdf: PdfConfig = field(default_factory=PdfConfig)

    _config_path: Path | None = field(default=None, repr=False)

    @property
    def config_path(self) -> Path | None:
        """Get the path to the config file that was loaded."""
        return self._config_path


# =============================================================================
# Environment Variable Substitution
# =============================================================================


def substitute_env_vars(value: Any) -> Any:
    """Substitute environment variables in config values.

    Supports ${VAR} syntax for environment variable substitution.
    Example: ${DOCS_TITLE} -> value of DOCS_TITLE

    Args:
        value: Config value (string, dict, list, or other)

    Returns:
        Value with environment variables substituted

    Raises:
        ValueError: If a referenced variable is not set
    """
    if isinstance(value, str):
        pattern = re.compile(r"\$\{([^}]+)\}")

        def replace_var(match: re.Match[str]) -> str:
            var_name = match.group(1)
            env_value = os.environ.get(var_name)
            if env_value is None:
                raise ValueError(f"Environment variable not set: {var_name}")
            return env_value

        return pattern.sub(replace_var, value)

    elif isinstance(value, dict):
        return {k: substitute_env_vars(v) for k, v in value.items()}

    elif isinstance(value, list):
        return [substitute_env_vars(v) for v in value]

    return value


# =============================================================================
# Config File Discovery
# =============================================================================


def find_config_file(start_path: Path | None = None) -> Path | None:
    """Find configuration file in standard locations.

    Search order:
    1. ./.docsmith/config.yaml
    2. ./docsmith.yaml

    Args:
        start_path: Starting directory for search (defaults to cwd)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_path is None:
        start_path = Path.cwd()

    start_path = start_path.resolve()

    candidates = [
        start_path / ".docsmith" / "config.yaml",
        start_path / "docsmith.yaml",
    ]

    for candidate in candidates:
        if candidate.exists():
            return candidate

    return None


# =============================================================================
# Config Loading
# =============================================================================


def load_config_from_dict(data: dict[str, Any]) -> DocsmithConfig:
    """Load configuration from a dictionary.

    Args:
        data: Configuration dictionary

    Returns:
        DocsmithConfig instance

    Raises:
        ValueError: If a value is invalid
    """
    data = substitute_env_vars(data)

    config = DocsmithConfig()

    if "project" in data:
        project_data = data["project"] or {}
        config.project = ProjectConfig(
            name=str(project_data.get("name", config.project.name)),
            include=list(project_data.get("include") or []),
            exclude=list(project_data.get("exclude", config.project.exclude) or []),
        )

    if "output" in data:
        output_data = data["output"] or {}
        config.output = OutputConfig(
            path=str(output_data.get("path", config.output.path)),
            format=str(output_data.get("format", config.output.format)),
        )

    if "html" in data:
        html_data = data["html"] or {}
        config.html = HtmlConfig(stylesheet=html_data.get("stylesheet"))

    if "pdf" in data:
        pdf_data = data["pdf"] or {}
        config.pdf = PdfConfig(
            page_size=str(pdf_data.get("page_size", config.pdf.page_size)),
            font_size=float(pdf_data.get("font_size", config.pdf.font_size)),
            margin=float(pdf_data.get("margin", config.pdf.margin)),
        )

    return config


def load_config(
    config_path: Path | None = None,
    auto_discover: bool = True,
) -> DocsmithConfig:
    """Load configuration from file.

    Args:
        config_path: Explicit path to config file
        auto_discover: Whether to search for config file if not specified

    Returns:
        DocsmithConfig instance

    Raises:
        FileNotFoundError: If config_path specified but doesn't exist
    """
    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        found_path = config_path
    elif auto_discover:
        found_path = find_config_file()
    else:
        found_path = None

    if found_path is not None:
        with open(found_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        config = load_config_from_dict(data)
        config._config_path = found_path
    else:
        config = DocsmithConfig()

    return config


def create_default_config() -> str:
    """Create default configuration YAML content.

    Returns:
        YAML string with default configuration and comments
    """
    return '''# docsmith configuration

# Project settings
project:
  name: "Generated Documentation"
  # include:            # Glob patterns of files to read (default: all)
  #   - "src/*"
  exclude:
    - ".git/*"
    - "node_modules/*"
    - "target/*"
    - "build/*"

# Output settings
output:
  path: "docs"      # File for xml/pdf, base directory for html
  format: "html"    # xml, html, pdf

# HTML document set
html:
  # stylesheet: "docs/custom.css"

# PDF layout
pdf:
  page_size: "a4"   # a4, letter
  font_size: 10
  margin: 50
'''
