from team_portal.reviews.schemas.reviews import AttachmentSchema
from team_portal.reviews.schemas.reviews import ReviewSchema
from team_portal.reviews.schemas.reviews import TemplateSchema

__all__ = ["AttachmentSchema", "ReviewSchema", "TemplateSchema"]
