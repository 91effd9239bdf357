"""FastAPI dependencies for identity and authentication."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from cardforge.domain.common.value_objects.ids import OwnerId
from cardforge.exceptions import CredentialsException
from cardforge.infrastructure.identity.auth.token_service import verify_access_token

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_owner(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> OwnerId:
    """
    Get the authenticated owner from the bearer token.

    There is no anonymous or default owner: every request must carry a
    valid token.

    Raises:
        CredentialsException: If the token is missing or invalid
    """
    if credentials is None:
        raise CredentialsException

    owner_id = verify_access_token(credentials.credentials)
    if owner_id is None:
        raise CredentialsException

    return OwnerId(owner_id)


CurrentOwner = Annotated[OwnerId, Depends(get_current_owner)]
