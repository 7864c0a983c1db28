import logging
from sqlalchemy.orm import Session

from ..core import security
from ..db import models

logger = logging.getLogger(__name__)


def _sync_admin(admin: models.User, password: str) -> list[str]:
    changed = []
    if not security.verify_password(password, admin.password_hash):
        admin.password_hash = security.get_password_hash(password)
        changed.append("password")
    if admin.role != models.UserRole.admin:
        admin.role = models.UserRole.admin
        changed.append("role")
    return changed


def ensure_admin_exists(session: Session, login: str, password: str) -> models.User:
    """Make sure the configured dashboard login exists with the admin role.

    An existing account with that login is promoted and its password reset
    to the configured one.
    """

    admin = session.query(models.User).filter_by(login=login).first()
    if admin is None:
        admin = models.User(
            login=login,
            name="Administrator",
            password_hash=security.get_password_hash(password),
            role=models.UserRole.admin,
        )
        session.add(admin)
        session.commit()
        logger.info("Created default admin user", extra={"login": login})
        return admin

    changed = _sync_admin(admin, password)
    if changed:
        session.commit()
        logger.info("Updated default admin user", extra={"login": login, "fields": changed})
    else:
        logger.info("Default admin user is up to date", extra={"login": login})
    return admin
