from django.contrib import admin

from .models import UserProfile, UserSession


@admin.register(UserProfile)
class UserProfileAdmin(admin.ModelAdmin):
    list_display = ("user", "created_at", "updated_at")
    search_fields = ("user__username", "user__email")
    raw_id_fields = ("user",)


@admin.register(UserSession)
class UserSessionAdmin(admin.ModelAdmin):
    list_display = ("session_id", "curr_user", "curr_jlpt_level", "curr_page", "dark_mode_active", "updated_at")
    list_filter = ("curr_jlpt_level", "dark_mode_active")
    search_fields = ("session_id", "curr_user__username")
    raw_id_fields = ("curr_user",)
