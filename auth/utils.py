# Password hashing and JWT helpers

from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from jose import JWTError, jwt
from pydantic import BaseModel

from config.app_config import BCRYPT_ROUNDS, JWT_ALGORITHM, JWT_EXPIRES_MINUTES, JWT_SECRET_KEY


class TokenData(BaseModel):
    user_id: Optional[str] = None


def get_password_hash(password: str) -> str:
    """Hash a password with bcrypt. Bcrypt only looks at the first 72 bytes."""
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8")[:72], salt).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8")[:72], password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash
        return False


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=JWT_EXPIRES_MINUTES))
    to_encode["exp"] = expire
    return jwt.encode(to_encode, JWT_SECRET_KEY, algorithm=JWT_ALGORITHM)


def decode_access_token(token: str) -> Optional[TokenData]:
    """Decode and validate JWT token. Returns None for invalid or expired tokens."""
    try:
        payload = jwt.decode(token, JWT_SECRET_KEY, algorithms=[JWT_ALGORITHM])
    except JWTError:
        return None
    user_id = payload.get("sub") or payload.get("user_id")
    if user_id is None:
        return None
    return TokenData(user_id=user_id)
