from django.urls import path
from . import views

app_name = "core"

urlpatterns = [
    path("", views.home, name="home"),
    path("dialog", views.dialog, name="dialog"),
    path("empty", views.empty, name="empty"),
    path("health", views.health, name="health"),
]
