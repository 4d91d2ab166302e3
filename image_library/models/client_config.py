from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class ClientConfig(BaseSettings):
    """Model holding the client configuration"""

    # service config
    library_url: str = "http://localhost:8002"
    request_timeout: float = Field(default=30.0, gt=0)

    # logging config
    log_level: LogLevel = "INFO"

    model_config = SettingsConfigDict(env_file="config/.env", extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value


@lru_cache()
def get_config():
    return ClientConfig()
