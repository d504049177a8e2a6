"""Core app configuration."""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Configuration for the core app."""

    name = "team_portal.core"
    verbose_name = "Core"
