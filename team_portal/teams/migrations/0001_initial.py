# Generated manually on 2026-10-18

import uuid

import django.db.models.deletion
import django.utils.timezone
import model_utils.fields
from django.conf import settings
from django.db import migrations, models

import team_portal.teams.codes


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Team',
            fields=[
                ('created', model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name='created')),
                ('modified', model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name='modified')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('code', models.CharField(default=team_portal.teams.codes.generate_team_code, help_text='Code shared with classmates to join the team', max_length=6, unique=True, verbose_name='join code')),
                ('approval', models.CharField(choices=[('pending', 'En attente'), ('approved', 'Approuve'), ('rejected', 'Rejete')], default='pending', max_length=20, verbose_name='approval')),
                ('theme', models.CharField(blank=True, max_length=100, verbose_name='theme')),
                ('mentor', models.CharField(blank=True, max_length=255, verbose_name='mentor')),
                ('team_lead', models.ForeignKey(help_text='The student who created the team', on_delete=django.db.models.deletion.PROTECT, related_name='led_teams', to=settings.AUTH_USER_MODEL, verbose_name='team lead')),
            ],
            options={
                'verbose_name': 'team',
                'verbose_name_plural': 'teams',
                'ordering': ['-created'],
            },
        ),
    ]
