"""Tests for seeding the built-in roles and permissions."""

from __future__ import annotations

import pytest
from sqlalchemy.exc import IntegrityError

from halluapp.application.use_cases.roles import SeedResult, seed_roles_and_permissions
from halluapp.infrastructure.models import PermissionModel, RoleModel
from halluapp.infrastructure.repositories import RoleRepository


def test_seeding_twice_creates_nothing_new(db_session) -> None:
    result = seed_roles_and_permissions(db_session)

    assert result == SeedResult(roles_created=0, permissions_created=0, grants_created=0)
    assert db_session.query(RoleModel).count() == 3
    assert db_session.query(PermissionModel).count() == 2


def test_admin_role_grants_management_permissions(db_session) -> None:
    admin = RoleRepository(db_session).get_by_slug("admin")

    assert admin.grants("manage-users")
    assert admin.grants("manage-roles")


def _duplicate_role_inserts(monkeypatch, times: int) -> list[str]:
    """Make ``ensure_role`` insert an already committed role ``times`` times first."""

    original = RoleRepository.ensure_role
    races: list[str] = []

    def racing_ensure_role(self, *, name, slug):
        if len(races) < times:
            races.append(slug)
            self.session.add(RoleModel(name=name, slug=slug))
            self.session.flush()
        return original(self, name=name, slug=slug)

    monkeypatch.setattr(RoleRepository, "ensure_role", racing_ensure_role)
    return races


def test_concurrent_seeding_is_rolled_back_and_retried(db_session, monkeypatch) -> None:
    races = _duplicate_role_inserts(monkeypatch, times=1)

    result = seed_roles_and_permissions(db_session)

    assert races == ["admin"]
    assert result.roles_created == 0
    assert db_session.query(RoleModel).filter_by(slug="admin").count() == 1


def test_seeding_gives_up_after_repeated_conflicts(db_session, monkeypatch) -> None:
    _duplicate_role_inserts(monkeypatch, times=10)

    with pytest.raises(IntegrityError):
        seed_roles_and_permissions(db_session)
