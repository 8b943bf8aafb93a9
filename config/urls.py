from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls),
    path('', include('core.urls', namespace='core')),
    path('', include('kanji.urls', namespace='kanji')),
    path('', include('uploads.urls', namespace='uploads')),
]
