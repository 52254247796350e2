# Authentication Dependencies for the Inverso marketplace
# Provides dependencies for getting the current user from JWT token

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from typing import Optional

from database.config import get_db
from database.models import User
from auth.utils import decode_access_token
from core.errors import AuthenticationError


security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db)
) -> User:
    """
    Validate JWT token and return current user.
    This is the core authentication dependency.
    """
    if not credentials:
        raise AuthenticationError("Access token required")

    token_data = decode_access_token(credentials.credentials)
    if token_data is None:
        raise AuthenticationError("Invalid or expired token")

    user = db.query(User).filter(User.id == token_data.user_id).first()
    if user is None:
        raise AuthenticationError("User not found")

    return user

