"""Application settings loaded from environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # API
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=0, le=65535)

    # Logging
    log_level: str = "info"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        # PORT= behaves like an unset PORT
        env_ignore_empty = True


settings = Settings()
