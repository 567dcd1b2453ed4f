"""Unit tests for UserProfile entity."""

import pytest
from domain.entities import UserProfile
from domain.enums import UserRole
from domain.exceptions import ValidationError


class TestUserProfile:
    """Test UserProfile validation and role changes."""

    def test_default_role_is_labor(self):
        """Test that new users are workers unless stated otherwise."""
        profile = UserProfile(id="user-1")
        assert profile.role == UserRole.LABOR
        assert profile.is_labor is True
        assert profile.is_supervisor is False

    def test_role_given_as_string(self):
        profile = UserProfile(id="user-1", role="supervisor")
        assert profile.role == UserRole.SUPERVISOR

    def test_empty_id_raises_error(self):
        """Test that blank ids are rejected."""
        with pytest.raises(ValidationError, match="User id cannot be empty"):
            UserProfile(id="  ")

    def test_unknown_role_raises_error(self):
        with pytest.raises(ValueError):
            UserProfile(id="user-1", role="foreman")

    def test_change_role(self):
        """Test switching between supervisor and labor."""
        profile = UserProfile(id="user-1")
        profile.change_role(UserRole.SUPERVISOR)
        assert profile.is_supervisor is True
