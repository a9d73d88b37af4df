import os
from typing import Annotated

from fastapi import Header, HTTPException


def require_admin(
    x_admin_token: Annotated[str | None, Header(alias="x-admin-token")] = None,
) -> None:
    """
    Guard for the preview endpoint. ADMIN_TOKEN is looked up on every request,
    so rotating the token does not need a restart.
    """
    expected = os.getenv("ADMIN_TOKEN", "")
    if not expected:
        raise HTTPException(status_code=500, detail="ADMIN_TOKEN not configured on server.")
    if x_admin_token != expected:
        raise HTTPException(status_code=401, detail="Unauthorized.")


def require_client(
    x_api_key: Annotated[str | None, Header(alias="x-api-key")] = None,
    x_admin_token: Annotated[str | None, Header(alias="x-admin-token")] = None,
) -> None:
    """
    Guard for the import endpoint: a matching X-Admin-Token always passes,
    otherwise X-Api-Key must equal AIKEN_API_KEY.
    """
    admin = os.getenv("ADMIN_TOKEN", "")
    if admin and x_admin_token == admin:
        return

    api_key = os.getenv("AIKEN_API_KEY", "")
    if not api_key:
        raise HTTPException(status_code=500, detail="AIKEN_API_KEY not configured on server.")
    if x_api_key != api_key:
        raise HTTPException(status_code=401, detail="Unauthorized.")
