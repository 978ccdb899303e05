"""
URL configuration for the Submission Desk service.
"""

from django.urls import include, path

urlpatterns = [
    path("", include("apps.submissions.urls")),
]

handler400 = "apps.core.views.bad_request"
handler404 = "apps.core.views.not_found"
handler500 = "apps.core.views.server_error"
