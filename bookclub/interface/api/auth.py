"""Caller identity for routes."""

from fastapi import HTTPException, status

from bookclub.domain.service import JWTService


def require_user_id(jwt_service: JWTService, auth_token: str | None, action: str) -> str:
    """Resolve the caller from the auth cookie or reject the request.

    Args:
        jwt_service: JWT service for token verification
        auth_token: Token from the auth cookie
        action: What the caller is trying to do, for the error detail

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return user_id
