"""Jinja2 filters for the documentation templates.

These filters derive display values from the documentation model so that
templates stay free of string manipulation.
"""

import re

from jinja2 import Environment

from docsmith.models import DocumentationBlock
from docsmith.models.documentation import PARAM_TAG, RETURN_TAG

# Anything outside this set is replaced when building page keys
_KEY_UNSAFE = re.compile(r"[^A-Za-z0-9_-]")

# End of the first sentence: a period followed by whitespace or end of text
_SENTENCE_END = re.compile(r"\.(\s|$)")

# Tags rendered in dedicated sections rather than the generic tag list
STRUCTURED_TAGS = frozenset({PARAM_TAG, RETURN_TAG})


def page_key(file_path: str) -> str:
    """Derive the page key of a documented file.

    Path separators and dots become underscores, so
    ``com/acme/Calculator.java`` maps to ``com_acme_Calculator_java``.

    Args:
        file_path: File path relative to the input root

    Returns:
        Key usable as a file name
    """
    key = _KEY_UNSAFE.sub("_", file_path.strip("/"))
    return key or "_"


def first_sentence(text: str | None) -> str:
    """Return the first sentence of a description, on a single line."""
    if not text:
        return ""
    flat = " ".join(text.split())
    match = _SENTENCE_END.search(flat)
    return flat[: match.start() + 1] if match else flat


def other_tags(block: DocumentationBlock | None) -> list[tuple[str, str]]:
    """List (name, value) pairs for tags without a dedicated section.

    Args:
        block: Documentation block (may be None)

    Returns:
        Pairs in tag order, excluding ``@param`` and ``@return``
    """
    if block is None:
        return []
    return [
        (name, value)
        for name, values in block.tags.items()
        if name not in STRUCTURED_TAGS
        for value in values
    ]


def register_filters(env: Environment) -> None:
    """Register all documentation filters on an environment."""
    env.filters["page_key"] = page_key
    env.filters["first_sentence"] = first_sentence
    env.filters["other_tags"] = other_tags
