from dataclasses import dataclass
import os
from dotenv import load_dotenv

load_dotenv()


def _env(key: str, default: str = "") -> str:
    return os.getenv(key, default)


@dataclass
class ClientSettings:
    api_base_url: str = _env("API_BASE_URL", "http://localhost:8000/api/v1")
    timeout: float = float(_env("API_TIMEOUT", "10"))


def get_settings() -> ClientSettings:
    return ClientSettings()
