from django.urls import include, path

from .views import DocumentView

urlpatterns = [
    path("", DocumentView.as_view(), name="document"),
    path("api/", include("viewer.api.urls")),
]
