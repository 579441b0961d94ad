import logging
import re
from typing import Annotated

from beanie import PydanticObjectId
from bson.errors import InvalidId
from fastapi import Depends, HTTPException, Query, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import ExpiredSignatureError, JWTError
from pydantic import ValidationError

from app.core.security import decode_access_token
from app.models.user import User
from app.schemas.token import TokenPayload

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

def parse_positive_int(value: str | None, default: int) -> int:
    """
    Leading integer of ``value``; anything missing, non-numeric or below 1
    falls back to ``default``.
    """
    match = _LEADING_INT.match(value or "")
    if not match:
        return default
    number = int(match.group(1))
    return number if number >= 1 else default

class PageParams:
    def __init__(
        self,
        page: Annotated[str | None, Query(description="Page number, defaults to 1")] = None,
        limit: Annotated[str | None, Query(description="Items per page, defaults to 20")] = None,
    ):
        self.page = parse_positive_int(page, DEFAULT_PAGE)
        self.limit = parse_positive_int(limit, DEFAULT_LIMIT)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

bearer_scheme = HTTPBearer(auto_error=False)

def _unauthorized(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=message,
        headers={"WWW-Authenticate": "Bearer"},
    )

async def get_current_user(
    token: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> User:
    """
    Resolves the bearer token to an active user. The user is handed to
    route handlers as an explicit parameter.
    """
    if token is None or token.scheme.lower() != "bearer" or not token.credentials:
        raise _unauthorized("Authentication required - missing or invalid token format")

    try:
        payload = decode_access_token(token.credentials)
        token_data = TokenPayload(**payload)
        if not token_data.sub:
            raise _unauthorized("Invalid token")
        user_id = PydanticObjectId(token_data.sub)
    except ExpiredSignatureError:
        raise _unauthorized("Token has expired")
    except (JWTError, ValidationError, InvalidId, TypeError):
        raise _unauthorized("Invalid token")

    user = await User.get(user_id)
    if not user or not user.is_active:
        logger.warning("Rejected token for missing or inactive user %s", user_id)
        raise _unauthorized("Authentication failed - user not found or inactive")
    return user

CurrentUser = Annotated[User, Depends(get_current_user)]
