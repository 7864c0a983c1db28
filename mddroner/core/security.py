from datetime import datetime, timedelta
from typing import Any, Dict

from jose import jwt
from passlib.context import CryptContext

from ..config import get_settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
ALGORITHM = "HS256"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def session_lifetime() -> timedelta:
    return timedelta(minutes=get_settings().jwt_expire_min)


def create_session_token(user_id: int, role: str, expires_delta: timedelta | None = None) -> str:
    """Sign a session token carrying the user id (``sub``) and role."""

    settings = get_settings()
    expire = datetime.utcnow() + (expires_delta or session_lifetime())
    claims = {"sub": str(user_id), "role": role, "exp": expire}
    return jwt.encode(claims, settings.jwt_secret, algorithm=ALGORITHM)


def read_session_subject(token: str) -> int | None:
    """Return the user id from a session token; ``JWTError`` if it is invalid."""

    settings = get_settings()
    payload: Dict[str, Any] = jwt.decode(token, settings.jwt_secret, algorithms=[ALGORITHM])
    subject = payload.get("sub")
    if subject is None:
        return None
    try:
        return int(subject)
    except ValueError:
        return None
