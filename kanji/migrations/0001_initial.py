# Generated manually
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Kanji',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('kanji_char', models.CharField(max_length=8, verbose_name='Kanji')),
                ('romaji_onyomi', models.CharField(blank=True, max_length=100, verbose_name="On'yomi (romaji)")),
                ('romaji_kunyomi', models.CharField(blank=True, max_length=100, verbose_name="Kun'yomi (romaji)")),
                ('hiragana_onyomi', models.CharField(blank=True, max_length=100, verbose_name="On'yomi (hiragana)")),
                ('hiragana_kunyomi', models.CharField(blank=True, max_length=100, verbose_name="Kun'yomi (hiragana)")),
                ('jlpt_level', models.CharField(choices=[('n1', 'N1'), ('n2', 'N2'), ('n3', 'N3'), ('n4', 'N4'), ('n5', 'N5')], max_length=2, verbose_name='JLPT')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Kanji',
                'verbose_name_plural': 'Kanji',
                'db_table': 'kanji',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='KanjiCreation',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_by', models.CharField(max_length=150)),
                ('created_date', models.DateTimeField(auto_now_add=True)),
                ('image_url', models.URLField(blank=True, max_length=500, null=True)),
                ('mapping_url', models.URLField(blank=True, max_length=500, null=True)),
                ('explanation', models.TextField()),
                ('is_public', models.BooleanField(default=False)),
                ('stars', models.PositiveIntegerField(default=0)),
                ('flags', models.PositiveIntegerField(default=0)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('kanji', models.ForeignKey(db_column='kanji_char_id', on_delete=django.db.models.deletion.PROTECT, related_name='creations', to='kanji.kanji')),
            ],
            options={
                'verbose_name': 'Kanji creation',
                'verbose_name_plural': 'Kanji creations',
                'db_table': 'kanji_creations',
                'ordering': ['-created_date'],
            },
        ),
        migrations.CreateModel(
            name='TempCreation',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('image_url', models.URLField(blank=True, max_length=500, null=True)),
                ('mapping_url', models.URLField(blank=True, max_length=500, null=True)),
                ('explanation', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('kanji', models.ForeignKey(db_column='kanji_char_id', on_delete=django.db.models.deletion.CASCADE, related_name='drafts', to='kanji.kanji')),
            ],
            options={
                'verbose_name': 'Draft creation',
                'verbose_name_plural': 'Draft creations',
                'db_table': 'temp_creations',
                'ordering': ['-created_at'],
            },
        ),
    ]
