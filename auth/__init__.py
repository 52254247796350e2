# Auth module for the Inverso marketplace
# Provides role-based access control, JWT helpers and ownership checks

from auth.roles import (
    UserType,
    Permission,
    ROLE_PERMISSIONS,
    get_permissions_for_role,
    has_permission,
    has_any_permission,
)

from auth.decorators import (
    AuthError,
    require_user_type,
    require_permission,
    require_admin,
    require_creator_owner,
    ensure_owner_or_admin,
    get_brand_profile,
    get_creator_profile,
    get_user_type,
)

__all__ = [
    # Roles
    "UserType",
    "Permission",
    "ROLE_PERMISSIONS",
    "get_permissions_for_role",
    "has_permission",
    "has_any_permission",

    # Dependencies
    "AuthError",
    "require_user_type",
    "require_permission",
    "require_admin",
    "require_creator_owner",
    "ensure_owner_or_admin",
    "get_brand_profile",
    "get_creator_profile",
    "get_user_type",
]
