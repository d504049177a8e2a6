# Generated manually on 2026-10-18

import uuid

import django.db.models.deletion
import django.utils.timezone
import model_utils.fields
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('teams', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Review',
            fields=[
                ('created', model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name='created')),
                ('modified', model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name='modified')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('stage', models.CharField(max_length=100, verbose_name='stage')),
                ('is_completed', models.BooleanField(default=False, verbose_name='completed')),
                ('completed_on', models.DateField(blank=True, null=True, verbose_name='completed on')),
                ('result', models.TextField(blank=True, verbose_name='result')),
                ('department', models.CharField(blank=True, max_length=100, verbose_name='department')),
                ('team', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='reviews', to='teams.team', verbose_name='team')),
            ],
            options={
                'verbose_name': 'review',
                'verbose_name_plural': 'reviews',
                'ordering': ['-created'],
            },
        ),
        migrations.CreateModel(
            name='ReviewAttachment',
            fields=[
                ('created', model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name='created')),
                ('modified', model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name='modified')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('attachment_name', models.CharField(max_length=255, verbose_name='name')),
                ('link', models.URLField(help_text='Uploaded file URL or external link', max_length=1000, verbose_name='link')),
                ('review', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='attachments', to='reviews.review', verbose_name='review')),
            ],
            options={
                'verbose_name': 'review attachment',
                'verbose_name_plural': 'review attachments',
                'ordering': ['-created'],
            },
        ),
        migrations.CreateModel(
            name='ReviewTemplate',
            fields=[
                ('created', model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name='created')),
                ('modified', model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name='modified')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=255, verbose_name='name')),
                ('description', models.TextField(blank=True, verbose_name='description')),
                ('link', models.URLField(blank=True, max_length=1000, verbose_name='link')),
                ('review', models.CharField(blank=True, help_text='Stage this template belongs to; empty for every stage', max_length=100, null=True, verbose_name='review stage')),
            ],
            options={
                'verbose_name': 'review template',
                'verbose_name_plural': 'review templates',
                'ordering': ['name'],
            },
        ),
    ]
