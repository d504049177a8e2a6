# Generated manually on 2026-10-18

import uuid

import django.db.models.deletion
import django.utils.timezone
import django_fsm
import model_utils.fields
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('teams', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='WorkLog',
            fields=[
                ('created', model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name='created')),
                ('modified', model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name='modified')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('date', models.DateField(verbose_name='date')),
                ('expected_task', models.TextField(verbose_name='expected task')),
                ('completed_task', models.TextField(verbose_name='completed task')),
                ('mentor_status', django_fsm.FSMField(choices=[('pending', 'En attente'), ('approved', 'Approuve'), ('rejected', 'Rejete')], default='pending', max_length=50, protected=True, verbose_name='mentor decision')),
                ('comments', models.TextField(blank=True, verbose_name='mentor comments')),
                ('student', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='work_logs', to=settings.AUTH_USER_MODEL, verbose_name='student')),
                ('team', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='work_logs', to='teams.team', verbose_name='team')),
            ],
            options={
                'verbose_name': 'work log',
                'verbose_name_plural': 'work logs',
                'ordering': ['-date', '-created'],
            },
        ),
    ]
