"""FastAPI dependencies for identity and authentication."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from flashdeck.core import container
from flashdeck.database import DatabaseSession
from flashdeck.domain.identity.entities.user import User
from flashdeck.domain.identity.exceptions import UserNotFoundError
from flashdeck.exceptions import CredentialsException
from flashdeck.infrastructure.identity.auth.token_service import verify_access_token

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    db: DatabaseSession,
) -> User:
    """
    Get the current authenticated user from the bearer token.

    Raises:
        CredentialsException: If the token is missing or invalid, or the user is unknown
    """
    if credentials is None:
        raise CredentialsException

    user_id = verify_access_token(credentials.credentials)
    if user_id is None:
        raise CredentialsException

    try:
        container.db.override(db)
        use_case = container.get_user_by_id_use_case()
        return use_case.get_user(user_id)
    except UserNotFoundError:
        raise CredentialsException from None
    finally:
        container.db.reset_override()
