"""FastAPI dependency injection for settings and the optional API token."""

import secrets
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from toolbox.core.settings import ToolboxSettings

_security = HTTPBearer(auto_error=False)


def load_settings() -> ToolboxSettings:
    return ToolboxSettings()


Settings = Annotated[ToolboxSettings, Depends(load_settings)]


async def require_api_token(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_security)],
    settings: Settings,
) -> None:
    """Check the Bearer token when TOOLBOX_API_TOKEN is configured."""
    expected = settings.api_token
    if not expected:
        return
    if credentials is None or not secrets.compare_digest(
        credentials.credentials.encode(), expected.encode()
    ):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
        )
