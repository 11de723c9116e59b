from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Event Admin Console'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # Backend REST API
    API_BASE_URL: str = 'http://localhost:8000'
    # Frontend origin used to build shareable activation links
    FRONTEND_URL: str = 'http://localhost:9002'

    # HTTP client
    HTTP_TIMEOUT_SECONDS: float = 10.0  # Connect/read/write timeout (seconds)
    HTTP_MAX_CONNECTIONS: int = 20

    @field_validator('API_BASE_URL', 'FRONTEND_URL', mode='before')
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip().rstrip('/')
        return v


settings = Settings()  # type: ignore
