"""docsmith - API documentation generator.

docsmith reads source files, extracts the documentation comments attached
to classes, fields and methods, and renders the collected tree as XML, a
linked HTML document set, or a PDF.

Flow:
- Scanners turn one source file into a FileModel (Java, Python)
- The Orchestrator collects FileModels into a ProjectModel
- Generators render the ProjectModel into an artifact (xml, html, pdf)
"""

__version__ = "0.1.0"
__author__ = "docsmith Contributors"
