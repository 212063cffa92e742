"""
Chirpy Backend — Request Context
=================================

What:  The per-application state handlers need: the hit counter and the
       platform tag.
How:   create_app() builds one ApiContext and stores it on `app.state`.
       Handlers receive it through the `get_api_context` dependency, so
       each app instance (and each test) owns its own counter instead of
       sharing a module-level global.
"""

from dataclasses import dataclass, field

from fastapi import Request

from chirpy.exceptions import ForbiddenError
from chirpy.services.hit_counter import HitCounter


@dataclass
class ApiContext:
    platform: str
    hit_counter: HitCounter = field(default_factory=HitCounter)

    def require_dev_platform(self) -> None:
        """
        Platform gate for destructive operations.

        Raises ForbiddenError unless platform is exactly "dev". This is a
        deployment flag, not authorization; do not reuse it as one.
        """
        if self.platform != "dev":
            raise ForbiddenError(context={"platform": self.platform})


def get_api_context(request: Request) -> ApiContext:
    """FastAPI dependency returning the ApiContext of the running app."""
    return request.app.state.api_context
