from typing import Optional, Self
from warnings import warn

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # API settings
    port: int = 5001
    host: str = "0.0.0.0"

    # WhatsApp Cloud API settings
    phone_number_id: str
    access_token: str
    whatsapp_api_url: str = "https://graph.facebook.com/v20.0"
    verify_token: str = Field(..., min_length=1)

    # Message store settings
    db_uri: str
    message_table: str = "messages"

    # Completion API settings
    openai_api_key: str
    completion_model: str = "gpt-4o-mini"

    # GraphQL (AppSync) settings
    appsync_api_url: str
    appsync_api_key: str

    http_timeout: float = 30.0

    # Optional settings
    debug: bool = False
    log_level: str = "INFO"
    logfire_token: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @model_validator(mode="after")
    def check_db_uri(self) -> Self:
        if self.db_uri.startswith("postgresql://"):
            warn("use 'postgresql+asyncpg://' instead of 'postgresql://' in db_uri")
        return self
