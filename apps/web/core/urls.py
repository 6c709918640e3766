"""
Core URL routes.
"""

from django.urls import path

from . import views

app_name = "core"

urlpatterns = [
    path("clock", views.clock, name="clock"),
]
