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
            name='Project',
            fields=[
                ('created', model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name='created')),
                ('modified', model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name='modified')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(max_length=255, unique=True, verbose_name='title')),
                ('description', models.TextField(help_text='Free-text description of the project', verbose_name='description')),
                ('theme', models.CharField(choices=[('Web Development', 'Web Development'), ('Mobile App', 'Mobile App'), ('AI/ML', 'AI/ML'), ('Blockchain', 'Blockchain'), ('IoT', 'IoT'), ('Cybersecurity', 'Cybersecurity'), ('Data Science', 'Data Science')], max_length=50, verbose_name='theme')),
                ('approval', models.CharField(choices=[('pending', 'En attente'), ('approved', 'Approuve'), ('rejected', 'Rejete')], default='pending', max_length=20, verbose_name='approval')),
                ('team', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='project', to='teams.team', verbose_name='team')),
            ],
            options={
                'verbose_name': 'project',
                'verbose_name_plural': 'projects',
                'ordering': ['-created'],
            },
        ),
    ]
