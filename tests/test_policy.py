"""Tests for user menu policy models and the in-memory repository."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from menuaccess.exceptions import PolicyValidationError
from menuaccess.permissions import Permissions
from menuaccess.policy import (
    DEMO_USER_POLICIES,
    InMemoryUserMenuPolicyRepository,
    UserMenuPolicy,
    UserMenuPolicyInput,
    UserMenuPolicyRepository,
    effective_overlay,
    parse_policy_record,
)

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


class TestUserMenuPolicy:
    """Tests for UserMenuPolicy model."""

    def test_camel_case_record(self) -> None:
        """Test that admin console payloads validate directly."""
        policy = UserMenuPolicy.model_validate(
            {
                "userId": "user-123",
                "deniedPermissions": [Permissions.MENU_DASHBOARD_OPS_VIEW],
                "deniedRouteKeys": ["grid.samples.infinite"],
                "defaultLandingRouteKey": "dashboard.main",
                "isActive": True,
            }
        )
        assert policy.user_id == "user-123"
        assert policy.denied_permissions == {Permissions.MENU_DASHBOARD_OPS_VIEW}
        assert policy.denied_route_keys == {"grid.samples.infinite"}
        assert policy.default_landing_route_key == "dashboard.main"

    def test_defaults(self) -> None:
        policy = UserMenuPolicy(user_id="user-1")
        assert policy.allowed_permissions == frozenset()
        assert policy.denied_permissions == frozenset()
        assert policy.allowed_route_keys is None
        assert policy.is_active is True
        assert policy.whitelist_enabled is False

    def test_empty_whitelist_is_disabled(self) -> None:
        """An empty allowed_route_keys does not engage whitelist mode."""
        policy = UserMenuPolicy(user_id="user-1", allowed_route_keys=[])
        assert policy.allowed_route_keys is None
        assert policy.whitelist_enabled is False

    def test_whitelist_enabled(self) -> None:
        policy = UserMenuPolicy(user_id="user-1", allowed_route_keys=["dashboard.main"])
        assert policy.whitelist_enabled is True

    def test_null_collections(self) -> None:
        """Test that null collections are read as empty."""
        policy = UserMenuPolicy.model_validate({"userId": "user-1", "deniedRouteKeys": None})
        assert policy.denied_route_keys == frozenset()

    def test_frozen(self) -> None:
        policy = UserMenuPolicy(user_id="user-1")
        with pytest.raises(ValidationError):
            policy.is_active = False  # type: ignore[misc]

    def test_user_id_required(self) -> None:
        with pytest.raises(ValidationError):
            UserMenuPolicy(user_id="")

    def test_expiry(self) -> None:
        """Test expiry relative to a reference time."""
        policy = UserMenuPolicy(user_id="user-1", expires_at=NOW)
        assert policy.is_expired(now=NOW - timedelta(seconds=1)) is False
        assert policy.is_expired(now=NOW) is False
        assert policy.is_expired(now=NOW + timedelta(seconds=1)) is True

    def test_naive_datetimes_are_utc(self) -> None:
        policy = UserMenuPolicy(user_id="user-1", expires_at=datetime(2024, 1, 1))
        assert policy.expires_at == datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert policy.is_expired(now=datetime(2024, 1, 2)) is True

    def test_no_expiry_never_expires(self) -> None:
        assert UserMenuPolicy(user_id="user-1").is_expired() is False

    def test_is_effective(self) -> None:
        assert UserMenuPolicy(user_id="user-1").is_effective(now=NOW) is True
        assert UserMenuPolicy(user_id="user-1", is_active=False).is_effective(now=NOW) is False
        expired = UserMenuPolicy(user_id="user-1", expires_at=NOW - timedelta(days=1))
        assert expired.is_effective(now=NOW) is False

    def test_conflicting_permissions(self) -> None:
        policy = UserMenuPolicy(
            user_id="user-1",
            allowed_permissions={Permissions.ACTION_USERS_DELETE, Permissions.PII_EXPORT},
            denied_permissions={Permissions.ACTION_USERS_DELETE},
        )
        assert policy.conflicting_permissions == {Permissions.ACTION_USERS_DELETE}


class TestEffectiveOverlay:
    """Tests for effective_overlay()."""

    def test_missing(self) -> None:
        assert effective_overlay(None) is None

    def test_inactive(self) -> None:
        assert effective_overlay(UserMenuPolicy(user_id="user-1", is_active=False)) is None

    def test_active(self) -> None:
        policy = UserMenuPolicy(user_id="user-1")
        assert effective_overlay(policy, now=NOW) is policy


class TestParsePolicyRecord:
    """Tests for parse_policy_record()."""

    def test_valid(self) -> None:
        assert parse_policy_record({"userId": "user-1"}).user_id == "user-1"

    def test_invalid_wraps_validation_error(self) -> None:
        with pytest.raises(PolicyValidationError) as exc_info:
            parse_policy_record({"userId": "user-1", "isActive": "sometimes"})
        assert exc_info.value.code == "POLICY_VALIDATION_ERROR"
        assert exc_info.value.details["user_id"] == "user-1"
        assert exc_info.value.details["errors"]


class TestUserMenuPolicyInput:
    """Tests for UserMenuPolicyInput."""

    def test_changes_only_set_fields(self) -> None:
        policy_input = UserMenuPolicyInput(deniedRouteKeys=["users.list"])
        assert policy_input.changes() == {"denied_route_keys": frozenset({"users.list"})}

    def test_explicit_empty_is_a_change(self) -> None:
        policy_input = UserMenuPolicyInput(denied_permissions=[])
        assert policy_input.changes() == {"denied_permissions": frozenset()}

    def test_null_is_active_dropped(self) -> None:
        assert UserMenuPolicyInput(is_active=None).changes() == {}

    def test_malformed_permission_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Malformed permission keys"):
            UserMenuPolicyInput(allowed_permissions=["users-delete"])

    def test_malformed_route_keys_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Malformed route keys"):
            UserMenuPolicyInput(denied_route_keys=["users.list", "NOT A KEY!!"])
        with pytest.raises(ValidationError, match="Malformed route keys"):
            UserMenuPolicyInput(allowedRouteKeys=["/products/crud"])

    def test_malformed_landing_route_key_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Malformed route key"):
            UserMenuPolicyInput(default_landing_route_key="Dashboard Main")

    def test_well_formed_route_keys_accepted(self) -> None:
        policy_input = UserMenuPolicyInput(
            allowed_route_keys=["dashboard.main", "grid.samples.multi-tabs"],
            default_landing_route_key="dashboard.main",
        )
        assert policy_input.allowed_route_keys == frozenset({"dashboard.main", "grid.samples.multi-tabs"})

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            UserMenuPolicyInput(userId="user-1")


class TestInMemoryRepository:
    """Tests for InMemoryUserMenuPolicyRepository."""

    @pytest.fixture
    def repository(self) -> InMemoryUserMenuPolicyRepository:
        return InMemoryUserMenuPolicyRepository.with_demo_policies(clock=lambda: NOW)

    def test_satisfies_protocol(self, repository: InMemoryUserMenuPolicyRepository) -> None:
        assert isinstance(repository, UserMenuPolicyRepository)

    def test_demo_policies_loaded(self, repository: InMemoryUserMenuPolicyRepository) -> None:
        assert len(repository) == len(DEMO_USER_POLICIES)

    @pytest.mark.asyncio
    async def test_fetch(self, repository: InMemoryUserMenuPolicyRepository) -> None:
        policy = await repository.fetch("user-whitelist")
        assert policy is not None
        assert policy.allowed_route_keys == {"dashboard.main", "products.crud", "articles.list"}

    @pytest.mark.asyncio
    async def test_fetch_missing(self, repository: InMemoryUserMenuPolicyRepository) -> None:
        assert await repository.fetch("nobody") is None

    @pytest.mark.asyncio
    async def test_demo_expired_policy(self, repository: InMemoryUserMenuPolicyRepository) -> None:
        policy = await repository.fetch("user-expired")
        assert policy is not None
        assert policy.is_expired(now=NOW) is True

    @pytest.mark.asyncio
    async def test_save_new(self, repository: InMemoryUserMenuPolicyRepository) -> None:
        """Test that saving for an unknown user creates a record."""
        policy = await repository.save(
            "user-new",
            UserMenuPolicyInput(allowed_permissions=[Permissions.ACTION_USERS_DELETE]),
        )
        assert policy.user_id == "user-new"
        assert policy.allowed_permissions == {Permissions.ACTION_USERS_DELETE}
        assert policy.is_active is True
        assert policy.created_at == NOW
        assert policy.updated_at == NOW
        assert await repository.fetch("user-new") == policy

    @pytest.mark.asyncio
    async def test_save_partial_update(self, repository: InMemoryUserMenuPolicyRepository) -> None:
        """Absent fields keep their value; explicit empty sets clear it."""
        policy = await repository.save(
            "user-restricted",
            UserMenuPolicyInput(denied_permissions=[], description="Relaxed"),
        )
        assert policy.denied_permissions == frozenset()
        assert policy.denied_route_keys == {"users.list", "users.detail", "grid.samples.infinite"}
        assert policy.default_landing_route_key == "dashboard.main"
        assert policy.description == "Relaxed"

    @pytest.mark.asyncio
    async def test_save_preserves_created_at(self, repository: InMemoryUserMenuPolicyRepository) -> None:
        policy = await repository.save("user-1", UserMenuPolicyInput(is_active=False))
        assert policy.is_active is False
        assert policy.created_at == datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert policy.updated_at == NOW

    @pytest.mark.asyncio
    async def test_save_clears_whitelist(self, repository: InMemoryUserMenuPolicyRepository) -> None:
        policy = await repository.save("user-whitelist", UserMenuPolicyInput(allowed_route_keys=[]))
        assert policy.whitelist_enabled is False

    @pytest.mark.asyncio
    async def test_save_conflict_warns(
        self,
        repository: InMemoryUserMenuPolicyRepository,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.WARNING):
            await repository.save(
                "user-1",
                UserMenuPolicyInput(
                    allowed_permissions=[Permissions.PII_EXPORT],
                    denied_permissions=[Permissions.PII_EXPORT],
                ),
            )
        assert "deny wins" in caplog.text

    @pytest.mark.asyncio
    async def test_save_requires_user_id(self, repository: InMemoryUserMenuPolicyRepository) -> None:
        with pytest.raises(PolicyValidationError):
            await repository.save("", UserMenuPolicyInput())

    @pytest.mark.asyncio
    async def test_delete(self, repository: InMemoryUserMenuPolicyRepository) -> None:
        assert await repository.delete("user-vip") is True
        assert await repository.fetch("user-vip") is None
        assert await repository.delete("user-vip") is False

    @pytest.mark.asyncio
    async def test_list_all(self, repository: InMemoryUserMenuPolicyRepository) -> None:
        user_ids = {policy.user_id for policy in await repository.list_all()}
        assert user_ids == {"user-1", "user-vip", "user-restricted", "user-whitelist", "user-expired"}

    def test_invalid_seed_rejected(self) -> None:
        with pytest.raises(PolicyValidationError):
            InMemoryUserMenuPolicyRepository([{"description": "no user id"}])
