from collections import OrderedDict
from pathlib import PurePosixPath

from django.utils.safestring import mark_safe
from django.views.generic import TemplateView

from .api.views import document_content, search
from .files import ResolutionError, read_document, resolve_document, sanitize_path, scan_markdown_files
from .files.resolver import get_default_file
from .markdown import render_markdown
from .markdown.postprocessors import apply_postprocessors
from .markdown.toc import extract_toc_from_html


def group_files_by_directory(files):
    """
    Group root-relative paths by their parent directory for the sidebar.

    Root-level documents come first under the "" key; directories follow in
    the (already sorted) order they first appear.
    """
    groups = OrderedDict()
    groups[""] = []
    for file in files:
        path = PurePosixPath(file)
        folder = "" if str(path.parent) == "." else str(path.parent)
        groups.setdefault(folder, []).append({"path": file, "name": path.name})

    return [
        {"folder": folder, "files": entries}
        for folder, entries in groups.items()
        if entries
    ]


class DocumentView(TemplateView):
    """
    Viewer page for one document.

    Displays:
    - Sidebar with every discovered document, grouped by directory
    - The rendered document (or an error document when it cannot be served)
    - An outline built from the document's headings

    Also answers the query-string API forms ``?api=content&file=...`` and
    ``?search&q=...`` so links built against those keep working.
    """

    template_name = "viewer/index.html"

    def get(self, request, *args, **kwargs):
        if request.GET.get("api") == "content" and "file" in request.GET:
            return document_content(request)
        if "search" in request.GET and "q" in request.GET:
            return search(request)

        context = self.get_context_data(**kwargs)
        status = 404 if context["error"] else 200
        return self.render_to_response(context, status=status)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        file = sanitize_path(self.request.GET.get("file", "")) or get_default_file()

        try:
            markdown_text = read_document(resolve_document(file))
            error = None
        except ResolutionError as exc:
            markdown_text = exc.as_markdown()
            error = exc.message

        html = apply_postprocessors(render_markdown(markdown_text), {"file": file})
        toc = extract_toc_from_html(html)

        context["file"] = file
        context["title"] = toc[0]["title"] if toc else PurePosixPath(file).name
        context["error"] = error
        context["content_html"] = mark_safe(html)
        context["toc"] = toc
        context["file_groups"] = group_files_by_directory(scan_markdown_files())
        return context
