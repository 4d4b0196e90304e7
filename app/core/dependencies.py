"""
Common dependencies for FastAPI routes.
"""

from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.core.exceptions import UnauthorizedException

# HTTP Bearer token security scheme
security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> dict:
    """
    Dependency to get the current authenticated user from JWT token.
    Returns user dict with 'id' and 'email'.
    """
    from app.auth.service import AuthService

    if not credentials:
        raise UnauthorizedException("Not authorized, no token")
    
    payload = AuthService.decode_token(credentials.credentials)
    if not payload or "sub" not in payload:
        raise UnauthorizedException("Not authorized, token failed")
    
    return {
        "id": payload["sub"],
        "email": payload.get("email"),
    }
