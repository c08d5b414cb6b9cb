"""Core app URL configuration."""

from django.urls import path

from . import views

app_name = "core"

urlpatterns = [
    path("", views.IndexView.as_view(), name="index"),
    path("contact/", views.ContactSubmitView.as_view(), name="contact_submit"),
    path("robots.txt", views.RobotsTxtView.as_view(), name="robots_txt"),
    # API
    path("api/showcase/", views.ShowcaseApiView.as_view(), name="showcase_api"),
    path("api/contact/", views.ContactApiView.as_view(), name="contact_api"),
]
