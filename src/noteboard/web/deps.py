from typing import Annotated, cast

from fastapi import Depends, Request
from fastapi.security import APIKeyHeader

from noteboard.app import App
from noteboard.errors import AuthenticationError

ACTOR_HEADER = "X-Actor-Id"

# Security schemes
actor_scheme = APIKeyHeader(name=ACTOR_HEADER, auto_error=False)


async def get_app(request: Request) -> App:
    return cast(App, request.app.state.app)


async def get_actor_id(actor_header: Annotated[str | None, Depends(actor_scheme)] = None) -> int:
    """Get the acting user id from the X-Actor-Id header.

    The header is trusted as-is; real authentication is left to a gateway in front of the service.
    """
    if actor_header is None:
        raise AuthenticationError
    try:
        return int(actor_header)
    except ValueError:
        raise AuthenticationError(f"Invalid {ACTOR_HEADER} header") from None


# Type aliases for dependencies
AppDep = Annotated[App, Depends(get_app)]
ActorIdDep = Annotated[int, Depends(get_actor_id)]
