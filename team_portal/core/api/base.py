"""
Base API class for auto-discovery of controllers.

All API controllers should inherit from BaseAPI to be automatically
registered with the NinjaExtraAPI instance.
"""


class BaseAPI:
    """
    Marker class for API controllers.

    Controllers inheriting from this class will be automatically
    discovered and registered by the API configuration.

    Example:
        @api_controller("/teams", tags=["Teams"])
        class TeamController(BaseAPI):
            @http_get("/my")
            def my_team(self):
                ...
    """

    pass
