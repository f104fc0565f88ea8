"""
Environment configuration.

Reads VERYFI_* variables (and an optional .env file) so credentials do not
have to be passed in code:

    VERYFI_CLIENT_ID, VERYFI_CLIENT_SECRET, VERYFI_USERNAME, VERYFI_API_KEY,
    VERYFI_BASE_URL, VERYFI_API_VERSION, VERYFI_TIMEOUT
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.veryfi.com/api/"
DEFAULT_API_VERSION = 8
DEFAULT_TIMEOUT = 120.0


class VeryfiSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="VERYFI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    client_id: str = Field(min_length=1)
    client_secret: str = Field(min_length=1)
    username: str = Field(min_length=1)
    api_key: str = Field(min_length=1)
    base_url: str = DEFAULT_BASE_URL
    api_version: int = Field(default=DEFAULT_API_VERSION, gt=0)
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
