"""FastAPI dependencies shared by the route handlers."""

from __future__ import annotations

from typing import Annotated, Optional

from fastapi import Depends, Header, Request

from tools.security import TokenClaims, bearer_token
from wearorithm_app.app import WearorithmApp


def get_service(request: Request) -> WearorithmApp:
    return request.app.state.wearorithm


Service = Annotated[WearorithmApp, Depends(get_service)]


def get_current_user(
    service: Service,
    authorization: Annotated[Optional[str], Header()] = None,
) -> TokenClaims:
    """Resolve the bearer token; 401 when absent, 403 when invalid or expired."""

    return service.authenticate_token(bearer_token(authorization))


CurrentUser = Annotated[TokenClaims, Depends(get_current_user)]


__all__ = ["CurrentUser", "Service", "get_current_user", "get_service"]
