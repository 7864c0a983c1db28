from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.security import OAuth2PasswordRequestForm
from pydantic import BaseModel
from sqlalchemy.orm import Session
from ...core import auth, security
from ...core.localtime import utc_now
from ...db.session import get_db
from ...db import models, schemas
from ...config import get_settings
from .. import deps


router = APIRouter(prefix="/auth", tags=["auth"])


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: schemas.Identity


@router.post("/login", response_model=TokenResponse)
def login(
    response: Response,
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db),
):
    user = auth.authenticate_user(db, form_data.username, form_data.password)
    if not user:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid credentials")
    settings = get_settings()
    expires = security.session_lifetime()
    token = security.create_session_token(user.id, user.role.value, expires)
    user.last_signed_in_at = utc_now()
    db.commit()
    response.set_cookie(
        settings.session_cookie_name,
        token,
        max_age=int(expires.total_seconds()),
        httponly=True,
        samesite="lax",
        secure=settings.env != "dev",
    )
    return TokenResponse(access_token=token, user=schemas.Identity.model_validate(user))


@router.get("/me", response_model=schemas.Identity | None)
def me(current: models.User | None = Depends(deps.get_current_user)):
    return current


@router.post("/logout", response_model=schemas.SuccessResponse)
def logout(response: Response):
    response.delete_cookie(get_settings().session_cookie_name)
    return schemas.SuccessResponse()
