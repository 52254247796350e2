# Auth Router for the Inverso marketplace
# Registration, login and token lifecycle

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database.config import get_db
from database.models import User, UserRole
from schemas.marketplace import UserRegister, UserLogin, UserResponse, AuthResponse
from auth.dependencies import get_current_user
from auth.utils import get_password_hash, verify_password, create_access_token
from core.errors import AuthenticationError, ConflictError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])


def _issue_token(user: User) -> str:
    return create_access_token(data={"sub": user.id})


def _user_with_profiles(user: User) -> dict:
    data = UserResponse.model_validate(user).model_dump()
    data["creator_id"] = user.creator.id if user.creator else None
    data["brand_id"] = user.brand.id if user.brand else None
    return data


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(user_data: UserRegister, db: Session = Depends(get_db)):
    """Register a new user. Returns the user and a JWT."""
    email = user_data.email.lower()
    if db.query(User).filter(User.email == email).first():
        raise ConflictError("User with this email already exists")

    user = User(
        email=email,
        password_hash=get_password_hash(user_data.password),
        role=UserRole(user_data.role.value),
    )
    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info("Registered %s user %s", user.role.value, user.id)
    return {
        "message": "User registered successfully",
        "user": user,
        "token": _issue_token(user),
    }


@router.post("/login", response_model=AuthResponse)
def login(credentials: UserLogin, db: Session = Depends(get_db)):
    user = db.query(User).filter(User.email == credentials.email.lower()).first()

    if not user or not verify_password(credentials.password, user.password_hash):
        raise AuthenticationError("Invalid email or password")

    return {
        "message": "Login successful",
        "user": user,
        "token": _issue_token(user),
    }


@router.get("/me")
def me(current_user: User = Depends(get_current_user)):
    """Current user plus the ids of any creator or brand profile."""
    return {"user": _user_with_profiles(current_user)}


@router.post("/refresh")
def refresh(current_user: User = Depends(get_current_user)):
    return {
        "message": "Token refreshed successfully",
        "token": _issue_token(current_user),
    }


@router.post("/logout")
def logout(current_user: User = Depends(get_current_user)):
    # Tokens are stateless; the client discards its copy.
    logger.info("User %s logged out", current_user.id)
    return {"message": "Logged out successfully"}
