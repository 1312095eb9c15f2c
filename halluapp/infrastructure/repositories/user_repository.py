"""Persistence layer for user data."""

from __future__ import annotations

from sqlalchemy.orm import Session

from halluapp.domain.entities import User
from halluapp.infrastructure.models import RoleModel, UserModel
from halluapp.infrastructure.repositories.role_repository import RoleRepository


class UserRepository:
    """Provide CRUD operations for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        model = self._get_model(email=email)
        return self._to_entity(model) if model else None

    def get_by_firebase_uid(self, firebase_uid: str) -> User | None:
        model = self._get_model(firebase_uid=firebase_uid)
        return self._to_entity(model) if model else None

    def find_by_firebase_uid_or_email(
        self, firebase_uid: str, email: str | None
    ) -> User | None:
        """Return the user linked to ``firebase_uid``, else the one owning ``email``."""

        user = self.get_by_firebase_uid(firebase_uid)
        if user is not None or not email:
            return user
        return self.get_by_email(email)

    def email_in_use(self, email: str, *, exclude_user_id: int | None = None) -> bool:
        query = self.session.query(UserModel.id).filter(UserModel.email == email)
        if exclude_user_id is not None:
            query = query.filter(UserModel.id != exclude_user_id)
        return query.first() is not None

    def create(self, user: User) -> User:
        """Insert ``user`` together with the role links listed on the entity."""

        model = UserModel()
        self._apply_entity_to_model(model, user)
        model.roles = self._load_role_models(user)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, user: User) -> User:
        model = self.session.get(UserModel, user.id)
        if not model:
            msg = f"User with id {user.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, user)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def attach_role(self, user_id: int, role_id: int) -> bool:
        """Link a role to a user; returns ``False`` when the link already exists."""

        model = self.session.get(UserModel, user_id)
        role = self.session.get(RoleModel, role_id)
        if model is None or role is None:
            msg = "User or role not found"
            raise ValueError(msg)
        if any(existing.id == role.id for existing in model.roles):
            return False
        model.roles.append(role)
        self.session.commit()
        return True

    def delete(self, user_id: int) -> None:
        model = self.session.get(UserModel, user_id)
        if not model:
            msg = f"User with id {user_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()

    def _get_model(self, **filters) -> UserModel | None:
        return self.session.query(UserModel).filter_by(**filters).first()

    def _load_role_models(self, user: User) -> list[RoleModel]:
        role_ids = [role.id for role in user.roles if role.id is not None]
        if not role_ids:
            return []
        return (
            self.session.query(RoleModel)
            .filter(RoleModel.id.in_(role_ids))
            .order_by(RoleModel.id)
            .all()
        )

    @staticmethod
    def _apply_entity_to_model(model: UserModel, user: User) -> None:
        model.name = user.name
        model.email = user.email
        model.password = user.password
        model.firebase_uid = user.firebase_uid

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            name=model.name,
            email=model.email,
            password=model.password,
            firebase_uid=model.firebase_uid,
            roles=[RoleRepository._to_entity(role) for role in model.roles],
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


__all__ = ["UserRepository"]
