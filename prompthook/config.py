from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite:///./prompthook.db"
    debug: bool = False
    log_level: str = "INFO"

    openai_api_key: Optional[str] = None
    openai_api_url: str = "https://api.openai.com/v1/chat/completions"
    completion_timeout_seconds: float = 60.0
    delivery_timeout_seconds: float = 30.0

    cors_allow_origins: str = "*"

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
