"""FastAPI dependencies for the caller identity."""

from typing import Annotated

from fastapi import Depends, Request

from studyledger.config import Settings, get_settings
from studyledger.core import container
from studyledger.database import DatabaseSession
from studyledger.domain.identity.entities.user import User
from studyledger.domain.identity.exceptions import UserNotFoundError
from studyledger.exceptions import CredentialsException


def get_current_user(
    request: Request,
    db: DatabaseSession,
    settings: Annotated[Settings, Depends(get_settings)],
) -> User:
    """
    Get the current user from the identity header set by the upstream gateway.

    Args:
        request: Incoming request
        db: Database session
        settings: Application settings (name of the identity header)

    Returns:
        User domain entity

    Raises:
        CredentialsException: If the header is missing, malformed or names an unknown user
    """
    raw_user_id = request.headers.get(settings.USER_ID_HEADER)
    if raw_user_id is None or not raw_user_id.strip().isdigit():
        raise CredentialsException

    container.db.override(db)
    try:
        use_case = container.get_user_by_id_use_case()
        return use_case.get_user(int(raw_user_id))
    except UserNotFoundError:
        raise CredentialsException from None
    finally:
        container.db.reset_override()
