# Generated manually
from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='UserProfile',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('kanji_packs', models.JSONField(blank=True, default=list)),
                ('starred_kanji', models.JSONField(blank=True, default=list)),
                ('saved_kanji', models.JSONField(blank=True, default=list)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='kanji_profile', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'User profile',
                'verbose_name_plural': 'User profiles',
                'db_table': 'user_profiles',
            },
        ),
        migrations.CreateModel(
            name='UserSession',
            fields=[
                ('session_id', models.CharField(max_length=64, primary_key=True, serialize=False)),
                ('curr_jlpt_level', models.CharField(choices=[('n1', 'N1'), ('n2', 'N2'), ('n3', 'N3'), ('n4', 'N4'), ('n5', 'N5')], default='n5', max_length=2)),
                ('curr_page', models.CharField(default='home', max_length=100)),
                ('contact_popup_active', models.BooleanField(default=False)),
                ('login_popup_active', models.BooleanField(default=False)),
                ('payment_popup_active', models.BooleanField(default=False)),
                ('left_sidebar_active', models.BooleanField(default=False)),
                ('dark_mode_active', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('curr_user', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='ui_sessions', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'UI session',
                'verbose_name_plural': 'UI sessions',
                'db_table': 'sessions',
                'ordering': ['-updated_at'],
            },
        ),
    ]
