"""Submissions app URL configuration."""

from django.urls import path

from . import views

app_name = "submissions"

urlpatterns = [
    path("submit", views.SubmitView.as_view(), name="submit"),
    path("users", views.UserListView.as_view(), name="users"),
]
