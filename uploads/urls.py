from django.urls import path
from . import views

app_name = "uploads"

urlpatterns = [
    path("upload", views.upload_image, name="upload"),
    path("list-files", views.list_files, name="list_files"),
    path("delete-file", views.delete_file, name="delete_file"),
    path("files/<path:object_name>", views.serve_file, name="serve_file"),
]
