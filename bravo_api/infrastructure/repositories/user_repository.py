"""Persistence layer for user data."""

from __future__ import annotations

from sqlalchemy import func, or_
from sqlalchemy.orm import Session, joinedload

from bravo_api.domain.entities import Role, User
from bravo_api.infrastructure.models import UserModel


class UserRepository:
    """Provide lookup and write operations for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        model = self._get_model(id=user_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        model = self._get_model(email=email)
        return self._to_entity(model) if model else None

    def get_by_login(self, login: str) -> User | None:
        """Return the user whose username or email matches ``login``."""

        normalized = login.strip().lower()
        model = (
            self.session.query(UserModel)
            .options(joinedload(UserModel.role))
            .filter(
                or_(
                    func.lower(UserModel.username) == normalized,
                    func.lower(UserModel.email) == normalized,
                )
            )
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, user: User) -> User:
        model = UserModel()
        self._apply_entity_to_model(model, user)
        model.created_at = user.created_at
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        if model.role is None:
            self.session.refresh(model, attribute_names=["role"])
        return self._to_entity(model)

    def update(self, user: User) -> User:
        model = self._get_model(id=user.id)
        if not model:
            msg = f"User with id {user.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, user)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            role=UserRepository._role_to_entity(model.role),
            name=model.name,
            username=model.username,
            email=model.email,
            password=model.password,
            last_login=model.last_login,
            created_at=model.created_at,
            is_active=model.is_active,
        )

    def _get_model(self, **filters) -> UserModel | None:
        query = self.session.query(UserModel).options(joinedload(UserModel.role))
        return query.filter_by(**filters).first()

    @staticmethod
    def _apply_entity_to_model(model: UserModel, user: User) -> None:
        model.role_id = user.role.id
        model.name = user.name
        model.username = user.username
        model.email = user.email
        model.password = user.password
        model.last_login = user.last_login
        model.is_active = user.is_active

    @staticmethod
    def _role_to_entity(model_role) -> Role:
        if model_role is None:
            msg = "User role is not set"
            raise ValueError(msg)
        return Role(id=model_role.id, name=model_role.name, alias=model_role.alias)


__all__ = ["UserRepository"]
