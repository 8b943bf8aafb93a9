from django.conf import settings
from django.db import models

from kanji.models import JLPTLevel


class UserProfile(models.Model):
    """
    Study data attached to an auth user: owned kanji packs and the kanji ids
    the user starred or saved.
    """
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="kanji_profile",
    )
    kanji_packs = models.JSONField(default=list, blank=True)
    starred_kanji = models.JSONField(default=list, blank=True)
    saved_kanji = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "user_profiles"
        verbose_name = "User profile"
        verbose_name_plural = "User profiles"

    def __str__(self):
        return f"Profile of {self.user}"

    @classmethod
    def get_or_create_for_user(cls, user):
        profile, _ = cls.objects.get_or_create(user=user)
        return profile


class UserSession(models.Model):
    """
    UI state of one browser session (open popups, dark mode, current page).
    Anonymous sessions have no curr_user.
    """
    session_id = models.CharField(max_length=64, primary_key=True)
    curr_user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="ui_sessions",
    )
    curr_jlpt_level = models.CharField(max_length=2, choices=JLPTLevel.choices, default=JLPTLevel.N5)
    curr_page = models.CharField(max_length=100, default="home")
    contact_popup_active = models.BooleanField(default=False)
    login_popup_active = models.BooleanField(default=False)
    payment_popup_active = models.BooleanField(default=False)
    left_sidebar_active = models.BooleanField(default=False)
    dark_mode_active = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "sessions"
        ordering = ["-updated_at"]
        verbose_name = "UI session"
        verbose_name_plural = "UI sessions"

    def __str__(self):
        return self.session_id
