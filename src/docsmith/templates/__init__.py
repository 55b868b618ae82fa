"""Jinja2 templates and stylesheet for the HTML document set."""
