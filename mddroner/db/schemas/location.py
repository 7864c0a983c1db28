from pydantic import BaseModel


class Location(BaseModel):
    key: str
    name: str
    description: str
