from django.conf import settings


def get_renderer_config():
    """
    Configuration for the Markdown rendering pipeline.

    Every value can be overridden from Django settings; a render call can
    further override them through its ``context`` dict (same keys).

    - document_extension: links whose target ends with this extension
      (case-insensitive) are rewritten into viewer navigation links
    - diagram_language: fence language tag rendered as a diagram container
      instead of a code block
    - navigation_parameter: query parameter carrying the linked file
    """
    return {
        "document_extension": getattr(settings, "MARKVIEW_DOCUMENT_EXTENSION", ".md"),
        "diagram_language": getattr(settings, "MARKVIEW_DIAGRAM_LANGUAGE", "mermaid"),
        "navigation_parameter": "file",
    }
