"""Persistence layer for roles and permissions."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from halluapp.domain.entities import Permission, Role
from halluapp.infrastructure.models import PermissionModel, RoleModel


class RoleRepository:
    """Provide access to roles and the permissions they grant."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, role_id: int) -> Role | None:
        model = self.session.get(RoleModel, role_id)
        return self._to_entity(model) if model else None

    def get_by_slug(self, slug: str) -> Role | None:
        model = self.session.query(RoleModel).filter_by(slug=slug).first()
        return self._to_entity(model) if model else None

    def list(self) -> Sequence[Role]:
        query = self.session.query(RoleModel).order_by(RoleModel.id)
        return [self._to_entity(model) for model in query.all()]

    def ensure_role(self, *, name: str, slug: str) -> tuple[Role, bool]:
        """Return the role with ``slug``, creating it when missing.

        The boolean is ``True`` when a row was inserted. Nothing is committed.
        """

        model = self.session.query(RoleModel).filter_by(slug=slug).first()
        if model is not None:
            return self._to_entity(model), False
        model = RoleModel(name=name, slug=slug)
        self.session.add(model)
        self.session.flush()
        return self._to_entity(model), True

    def ensure_permission(self, *, name: str, slug: str) -> tuple[Permission, bool]:
        model = self.session.query(PermissionModel).filter_by(slug=slug).first()
        if model is not None:
            return self._permission_to_entity(model), False
        model = PermissionModel(name=name, slug=slug)
        self.session.add(model)
        self.session.flush()
        return self._permission_to_entity(model), True

    def grant_permission(self, role_id: int, permission_id: int) -> bool:
        """Link a permission to a role; ``False`` when already linked. Not committed."""

        role = self.session.get(RoleModel, role_id)
        permission = self.session.get(PermissionModel, permission_id)
        if role is None or permission is None:
            msg = "Role or permission not found"
            raise ValueError(msg)
        if any(existing.id == permission.id for existing in role.permissions):
            return False
        role.permissions.append(permission)
        self.session.flush()
        return True

    def commit(self) -> None:
        self.session.commit()

    @staticmethod
    def _permission_to_entity(model: PermissionModel) -> Permission:
        return Permission(id=model.id, name=model.name, slug=model.slug)

    @staticmethod
    def _to_entity(model: RoleModel) -> Role:
        return Role(
            id=model.id,
            name=model.name,
            slug=model.slug,
            permissions=[
                RoleRepository._permission_to_entity(permission)
                for permission in model.permissions
            ],
        )


__all__ = ["RoleRepository"]
