"""Jinja2 helpers shared by the template-based generators."""

from docsmith.renderers.filters import first_sentence, other_tags, page_key, register_filters

__all__ = ["first_sentence", "other_tags", "page_key", "register_filters"]
