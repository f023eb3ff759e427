"""
URL patterns for the viewer JSON API.

Endpoints:
- GET /api/content/ - Rendered document fragment
- GET /api/search/  - Full-text search across documents
"""

from django.urls import path

from .views import document_content, search

app_name = "api"

urlpatterns = [
    path("content/", document_content, name="content"),
    path("search/", search, name="search"),
]
