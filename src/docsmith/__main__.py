"""Entry point for running docsmith as a module.

Usage:
    python -m docsmith [command] [options]

Example:
    python -m docsmith generate src/ --format html --output site
    python -m docsmith formats
"""

from docsmith.cli import app

if __name__ == "__main__":
    app()
