from pydantic import BaseModel

from ..models.user import UserRole


class Identity(BaseModel):
    id: int
    login: str
    name: str | None = None
    role: UserRole

    class Config:
        from_attributes = True
