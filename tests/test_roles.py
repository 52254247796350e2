"""
Unit tests for role permissions.
"""

import pytest

from auth.roles import (
    Permission,
    ROLE_PERMISSIONS,
    UserType,
    get_permissions_for_role,
    has_any_permission,
    has_permission,
)


@pytest.mark.unit
class TestRolePermissions:

    def test_admin_holds_every_permission(self):
        assert ROLE_PERMISSIONS[UserType.ADMIN] == set(Permission)

    def test_brand_permissions(self):
        assert has_permission(UserType.BRAND, Permission.MANAGE_CAMPAIGNS)
        assert not has_permission(UserType.BRAND, Permission.APPLY_TO_CAMPAIGNS)

    def test_creator_permissions(self):
        assert has_permission(UserType.CREATOR, Permission.USE_CREATOR_TOOLS)
        assert not has_permission(UserType.CREATOR, Permission.IMPORT_CREATORS)

    def test_any_permission(self):
        assert has_any_permission(UserType.CREATOR, [Permission.MANAGE_USERS, Permission.UPLOAD_FILES])
        assert not has_any_permission(UserType.BRAND, [Permission.MANAGE_USERS, Permission.IMPORT_CREATORS])

    def test_everyone_may_upload(self):
        for user_type in UserType:
            assert Permission.UPLOAD_FILES in get_permissions_for_role(user_type)
