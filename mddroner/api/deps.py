from typing import Annotated
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError
from sqlalchemy.orm import Session
from ..config import get_settings
from ..core import auth, security
from ..db.session import get_db
from ..db.models import User
from ..services import notification_service
from ..services.booking_service import Notifier


oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/login", auto_error=False)


def get_current_user(
    request: Request,
    token: Annotated[str | None, Depends(oauth2_scheme)],
    db: Annotated[Session, Depends(get_db)],
) -> User | None:
    """Resolve the caller from the bearer header or the session cookie.

    Anonymous callers and invalid or expired tokens resolve to ``None``.
    """

    settings = get_settings()
    token = token or request.cookies.get(settings.session_cookie_name)
    if not token:
        return None
    try:
        user_id = security.read_session_subject(token)
    except JWTError:
        return None
    if user_id is None:
        return None
    return db.get(User, user_id)


def require_admin(user: Annotated[User | None, Depends(get_current_user)]) -> User:
    try:
        auth.ensure_admin(user)
    except auth.Forbidden as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden") from exc
    return user


def get_notifier() -> Notifier:
    return notification_service.notify_owner
