# Admin User Management Router

import logging
import math
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from config.app_config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from database.config import get_db
from database.models import User, UserRole
from schemas.marketplace import UserTypeEnum, UserRoleUpdate, UserResponse, SuccessResponse
from auth.decorators import require_admin
from core.errors import NotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Admin - Users"])


def _get_user_or_404(db: Session, user_id: str) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError("User not found")
    return user


@router.get("")
def list_users(
    page: int = Query(1, ge=1),
    page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    role: Optional[UserTypeEnum] = None,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin()),
):
    """List users, newest first, optionally filtered by role."""
    query = db.query(User)
    if role:
        query = query.filter(User.role == UserRole(role.value))

    total = query.count()
    users = (
        query.order_by(User.created_at.desc())
        .offset((page - 1) * page_size)
        .limit(page_size)
        .all()
    )

    return {
        "items": [UserResponse.model_validate(u) for u in users],
        "page": page,
        "page_size": page_size,
        "total": total,
        "pages": math.ceil(total / page_size) if total else 0,
    }


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: str,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin()),
):
    return _get_user_or_404(db, user_id)


@router.put("/{user_id}/role", response_model=UserResponse)
def update_user_role(
    user_id: str,
    update: UserRoleUpdate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin()),
):
    user = _get_user_or_404(db, user_id)
    previous = user.role
    user.role = UserRole(update.role.value)
    db.commit()
    db.refresh(user)

    logger.info("Admin %s changed role of %s: %s -> %s", admin.id, user.id, previous.value, user.role.value)
    return user


@router.delete("/{user_id}", response_model=SuccessResponse)
def delete_user(
    user_id: str,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin()),
):
    """Delete a user; profiles and their records cascade."""
    user = _get_user_or_404(db, user_id)
    db.delete(user)
    db.commit()

    logger.info("Admin %s deleted user %s", admin.id, user_id)
    return {"success": True}
