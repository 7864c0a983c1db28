from functools import lru_cache
import os
from pydantic import BaseModel, Field


class Settings(BaseModel):
    env: str = Field(default="dev", alias="ENV")
    timezone: str = Field(default="Asia/Hong_Kong", alias="TIMEZONE")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")

    database_url: str = Field(default="", alias="DATABASE_URL")
    postgres_db: str = Field(default="mddroner", alias="POSTGRES_DB")
    postgres_user: str = Field(default="mddroner", alias="POSTGRES_USER")
    postgres_password: str = Field(default="mddroner", alias="POSTGRES_PASSWORD")
    postgres_host: str = Field(default="localhost", alias="POSTGRES_HOST")
    postgres_port: int = Field(default=5432, alias="POSTGRES_PORT")

    jwt_secret: str = Field(default="secret", alias="JWT_SECRET")
    jwt_expire_min: int = Field(default=43200, alias="JWT_EXPIRE_MIN")
    session_cookie_name: str = Field(default="mddroner_session", alias="SESSION_COOKIE_NAME")

    telegram_bot_token: str = Field(default="", alias="TELEGRAM_BOT_TOKEN")
    owner_chat_id: str = Field(default="", alias="OWNER_CHAT_ID")

    default_admin_login: str = Field(default="admin", alias="DEFAULT_ADMIN_LOGIN")
    default_admin_password: str = Field(default="admin123", alias="DEFAULT_ADMIN_PASSWORD")

    class Config:
        populate_by_name = True

    @property
    def sqlalchemy_url(self) -> str:
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+psycopg2://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @property
    def allowed_origins(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(**os.environ)
