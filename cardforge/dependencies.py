"""FastAPI dependencies for the application."""

from fastapi import HTTPException, status

from cardforge.config import get_settings


def require_ai_enabled() -> None:
    """
    Dependency that requires AI to be enabled for the endpoint.

    Returns HTTP 410 Gone if no AI credentials are configured. Declare it in
    the route's dependencies so it runs before the AI client is built.

    Usage:
        @router.post("/endpoint", dependencies=[Depends(require_ai_enabled)])
        async def my_endpoint():
            ...
    """
    settings = get_settings()
    if not settings.ai_enabled:
        raise HTTPException(
            status_code=status.HTTP_410_GONE,
            detail="AI features are not enabled on this server",
        )
