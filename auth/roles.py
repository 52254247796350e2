# Role-Based Access Control for the Inverso marketplace
# This module defines user roles and permissions for the marketplace

from enum import Enum
from typing import List, Set


class UserType(str, Enum):
    """User types in the marketplace."""
    CREATOR = "creator"
    BRAND = "brand"
    ADMIN = "admin"


class Permission(str, Enum):
    """Fine-grained permissions for the platform."""

    # Brand permissions
    MANAGE_BRAND_PROFILE = "manage_brand_profile"
    MANAGE_CAMPAIGNS = "manage_campaigns"
    INVITE_CREATORS = "invite_creators"
    REVIEW_APPLICATIONS = "review_applications"
    MANAGE_SHORTLIST = "manage_shortlist"

    # Creator permissions
    MANAGE_CREATOR_PROFILE = "manage_creator_profile"
    APPLY_TO_CAMPAIGNS = "apply_to_campaigns"
    RESPOND_TO_APPLICATIONS = "respond_to_applications"
    USE_CREATOR_TOOLS = "use_creator_tools"

    # Common permissions
    VIEW_CAMPAIGNS = "view_campaigns"
    VIEW_CREATORS = "view_creators"
    UPLOAD_FILES = "upload_files"

    # Admin permissions
    MANAGE_USERS = "manage_users"
    IMPORT_CREATORS = "import_creators"


# Role to permissions mapping
ROLE_PERMISSIONS: dict[UserType, Set[Permission]] = {
    UserType.BRAND: {
        Permission.MANAGE_BRAND_PROFILE,
        Permission.MANAGE_CAMPAIGNS,
        Permission.INVITE_CREATORS,
        Permission.REVIEW_APPLICATIONS,
        Permission.MANAGE_SHORTLIST,
        # Common
        Permission.VIEW_CAMPAIGNS,
        Permission.VIEW_CREATORS,
        Permission.UPLOAD_FILES,
    },

    UserType.CREATOR: {
        Permission.MANAGE_CREATOR_PROFILE,
        Permission.APPLY_TO_CAMPAIGNS,
        Permission.RESPOND_TO_APPLICATIONS,
        Permission.USE_CREATOR_TOOLS,
        # Common
        Permission.VIEW_CAMPAIGNS,
        Permission.VIEW_CREATORS,
        Permission.UPLOAD_FILES,
    },

    UserType.ADMIN: {
        # Admin has ALL permissions
        *Permission.__members__.values()
    },
}


def get_permissions_for_role(user_type: UserType) -> Set[Permission]:
    """Get all permissions for a given user type."""
    return ROLE_PERMISSIONS.get(user_type, set())


def has_permission(user_type: UserType, permission: Permission) -> bool:
    """Check if a user type has a specific permission."""
    return permission in get_permissions_for_role(user_type)


def has_any_permission(user_type: UserType, permissions: List[Permission]) -> bool:
    """Check if a user type has any of the given permissions."""
    user_permissions = get_permissions_for_role(user_type)
    return any(p in user_permissions for p in permissions)
