from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class TeamsConfig(AppConfig):
    name = "team_portal.teams"
    verbose_name = _("Team Management")
