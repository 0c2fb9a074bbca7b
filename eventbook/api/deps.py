# eventbook/api/deps.py
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt

from eventbook.core.config import settings
from eventbook.schemas.token import TokenPayload

STAFF_ROLE = "STAFF"

# The `tokenUrl` is only used for the OpenAPI documentation; tokens are
# issued by the identity provider, not by this service.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="token")


def get_current_user(token: str = Depends(oauth2_scheme)) -> TokenPayload:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=["HS256"])
        token_data = TokenPayload(**payload)
    except (JWTError, ValueError):
        # Catches any error from jose or Pydantic validation
        raise credentials_exception

    return token_data


def get_current_staff_user(
    current_user: TokenPayload = Depends(get_current_user),
) -> TokenPayload:
    """Staff console endpoints require the STAFF role claim."""
    if current_user.role != STAFF_ROLE:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Staff access required",
        )
    return current_user
