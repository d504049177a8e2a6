from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class WorkLogsConfig(AppConfig):
    name = "team_portal.worklogs"
    verbose_name = _("Work Logs")
