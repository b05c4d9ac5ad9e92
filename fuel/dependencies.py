"""Request dependencies shared by the fuel routes."""

from typing import Annotated

from fastapi import Depends, Header

from config import DEFAULT_USER_ID, USER_ID_HEADER


async def get_user_id(
    user_id: Annotated[str | None, Header(alias=USER_ID_HEADER)] = None,
) -> str:
    """Owner of the request, as forwarded by the authenticating proxy."""
    if user_id and user_id.strip():
        return user_id.strip()
    return DEFAULT_USER_ID


UserId = Annotated[str, Depends(get_user_id)]
