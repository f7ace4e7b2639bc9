from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    telegram_bot_token: str | None = Field(default=None, alias="TELEGRAM_BOT_TOKEN")
    # Base URL of a self-hosted Bot API server, e.g. http://localhost:8081
    telegram_api_server: str | None = Field(default=None, alias="TELEGRAM_API_SERVER")
    telegram_api_is_local: bool = Field(default=False, alias="TELEGRAM_API_IS_LOCAL")

    download_chunk_size: int = Field(default=65536, alias="DOWNLOAD_CHUNK_SIZE")
    download_timeout: int = Field(default=30, alias="DOWNLOAD_TIMEOUT")
    # None means the system temp directory.
    temp_dir: str | None = Field(default=None, alias="BOTKIT_TEMP_DIR")

    message_limit: int = Field(default=4096, alias="MESSAGE_LIMIT")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")


settings = Settings()
