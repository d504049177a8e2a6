from team_portal.worklogs.api.worklogs import WorkLogController

__all__ = ["WorkLogController"]
