from team_portal.worklogs.schemas.worklogs import WorkLogInputSchema
from team_portal.worklogs.schemas.worklogs import WorkLogSchema

__all__ = ["WorkLogSchema", "WorkLogInputSchema"]
