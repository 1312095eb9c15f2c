"""Use case for a user editing their own profile."""

from dataclasses import replace

from sqlalchemy.orm import Session

from halluapp.domain.entities import User
from halluapp.domain.exceptions import ConflictError, NotFoundError
from halluapp.infrastructure.repositories import UserRepository


def update_profile(
    session: Session,
    *,
    user_id: int,
    name: str | None = None,
    email: str | None = None,
) -> User:
    """Update the name and/or email of the given user."""

    repository = UserRepository(session)
    current_user = repository.get(user_id)
    if current_user is None:
        raise NotFoundError("User not found")

    new_email = current_user.email
    if email is not None and email != current_user.email:
        if repository.email_in_use(email, exclude_user_id=user_id):
            raise ConflictError("The email has already been taken")
        new_email = email

    updated_user = replace(
        current_user,
        name=name if name is not None else current_user.name,
        email=new_email,
    )
    return repository.update(updated_user)
