"""Identity checks shared by every privileged booking operation."""

from typing import Any

from sqlalchemy.orm import Session

from ..db import models
from . import security


class Forbidden(Exception):
    """Raised when the caller may not perform an admin-only operation."""


def authenticate_user(db: Session, login: str, password: str) -> models.User | None:
    user = db.query(models.User).filter_by(login=login).first()
    if not user:
        return None
    if not security.verify_password(password, user.password_hash):
        return None
    return user


def has_role(identity: Any, *roles: models.UserRole) -> bool:
    if identity is None:
        return False
    role = getattr(identity, "role", None)
    try:
        role = models.UserRole(role)
    except ValueError:
        return False
    return role in roles


def is_admin(identity: Any) -> bool:
    return has_role(identity, models.UserRole.admin)


def ensure_admin(identity: Any) -> None:
    if not is_admin(identity):
        raise Forbidden("Forbidden")
