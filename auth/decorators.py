# Authentication and Authorization Dependencies for the Inverso marketplace
# These provide easy-to-use access control for API endpoints

from fastapi import Depends
from sqlalchemy.orm import Session

from database.config import get_db
from database.models import User, Creator, Brand
from auth.roles import UserType, Permission, has_any_permission
from auth.dependencies import get_current_user
from core.errors import ForbiddenError, NotFoundError


# Kept as the name routers import for authorization failures
AuthError = ForbiddenError


def require_user_type(*allowed_types: UserType):
    """
    Dependency that requires the user to be one of the specified types.

    Usage:
        @router.post("/campaigns")
        async def create_campaign(
            user: User = Depends(require_user_type(UserType.BRAND))
        ):
            ...
    """
    async def dependency(current_user: User = Depends(get_current_user)) -> User:
        user_type = get_user_type(current_user)

        # Admin can access everything
        if user_type == UserType.ADMIN:
            return current_user

        if user_type not in allowed_types:
            allowed_names = " or ".join(t.value for t in allowed_types)
            raise AuthError(f"Access denied. Required role: {allowed_names}")

        return current_user

    return dependency


def require_permission(*permissions: Permission):
    """Dependency that requires the user to hold any of the given permissions."""
    async def dependency(current_user: User = Depends(get_current_user)) -> User:
        if not has_any_permission(get_user_type(current_user), list(permissions)):
            raise AuthError("You don't have permission to perform this action")
        return current_user

    return dependency


def require_admin():
    """
    Dependency that requires the user to be an admin.

    Usage:
        @router.get("/users")
        async def list_users(user: User = Depends(require_admin())):
            ...
    """
    async def dependency(current_user: User = Depends(get_current_user)) -> User:
        if get_user_type(current_user) != UserType.ADMIN:
            raise AuthError("Admin access required")
        return current_user

    return dependency


def require_creator_owner():
    """
    Dependency for /creators/{creator_id}/... routes: resolves the creator and
    requires the caller to own it or be an admin.
    """
    async def dependency(
        creator_id: str,
        current_user: User = Depends(get_current_user),
        db: Session = Depends(get_db),
    ) -> Creator:
        creator = db.query(Creator).filter(Creator.id == creator_id).first()
        if not creator:
            raise NotFoundError("Creator not found")
        ensure_owner_or_admin(current_user, creator.user_id)
        return creator

    return dependency


def ensure_owner_or_admin(user: User, owner_user_id: str, detail: str = "Access denied. You can only access your own resources.") -> None:
    """Raise ForbiddenError unless the user owns the resource or is an admin."""
    if get_user_type(user) == UserType.ADMIN:
        return
    if user.id != owner_user_id:
        raise AuthError(detail)


def get_brand_profile(db: Session, user: User) -> Brand:
    """Return the caller's brand profile or fail with ForbiddenError."""
    brand = db.query(Brand).filter(Brand.user_id == user.id).first()
    if not brand:
        raise AuthError("Brand profile not found")
    return brand


def get_creator_profile(db: Session, user: User) -> Creator:
    """Return the caller's creator profile or fail with ForbiddenError."""
    creator = db.query(Creator).filter(Creator.user_id == user.id).first()
    if not creator:
        raise AuthError("Creator profile not found")
    return creator


def get_user_type(user: User) -> UserType:
    """Helper to extract UserType from User object, tolerating raw string roles."""
    role = user.role.value if hasattr(user.role, "value") else user.role
    try:
        return UserType(str(role).lower())
    except ValueError:
        return UserType.CREATOR
