from team_portal.reviews.api.reviews import ReviewController

__all__ = ["ReviewController"]
