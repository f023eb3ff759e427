"""
JSON API views used by the viewer page.

Endpoints:
- GET /api/content/?file=<path> - Rendered HTML fragment of one document
- GET /api/search/?q=<query>    - Line matches across all documents
"""

from django.http import JsonResponse
from django.views.decorators.http import require_GET

from viewer.files import ResolutionError, read_document, resolve_document, sanitize_path
from viewer.files.resolver import get_default_file
from viewer.markdown import render_markdown
from viewer.search import InvalidSearchQuery, search_documents


@require_GET
def document_content(request):
    """
    Render one document to HTML.

    GET /api/content/?file=docs/guide.md

    Response (200):
    {
        "success": true,
        "file": "docs/guide.md",
        "html": "<h1>Guide</h1>..."
    }

    Response (404):
    {
        "success": false,
        "error": "File not found"
    }
    """
    file = sanitize_path(request.GET.get("file", "")) or get_default_file()

    try:
        path = resolve_document(file)
        markdown_text = read_document(path)
    except ResolutionError as exc:
        return JsonResponse({"success": False, "error": exc.message}, status=exc.status_code)

    return JsonResponse(
        {
            "success": True,
            "file": file,
            "html": render_markdown(markdown_text),
        }
    )


@require_GET
def search(request):
    """
    Search every document for a case-insensitive substring.

    GET /api/search/?q=install

    Response (200):
    {
        "success": true,
        "query": "install",
        "totalResults": 1,
        "results": [
            {
                "file": "docs/setup.md",
                "fileName": "setup.md",
                "matchCount": 2,
                "matches": [{"line": 3, "text": "...", "preview": "...<mark>install</mark>..."}]
            }
        ]
    }
    """
    query = request.GET.get("q", "").strip()

    try:
        results = search_documents(query)
    except InvalidSearchQuery as exc:
        return JsonResponse({"success": False, "error": str(exc), "results": []}, status=400)

    return JsonResponse(
        {
            "success": True,
            "query": query,
            "totalResults": len(results),
            "results": results,
        },
        json_dumps_params={"indent": 4},
    )
