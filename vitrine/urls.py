"""
URL configuration for the vitrine project.

Only a preview page is routed; components are rendered from templates.
"""
from django.urls import path

from apps.ui import views

urlpatterns = [
    path("ui/preview/", views.preview, name="ui-preview"),
]
