"""Environment-backed settings for ehr-connect.

Settings are read once per process and turned into a ClientConfig; the core
itself never touches the environment.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .client_config import BackendVariant, ClientConfig


class EhrConnectSettings(BaseSettings):
    """Settings loaded from ``EHR_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="EHR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Backend
    base_url: str = Field(description="Backend root URL, e.g. https://host/webchart/webchart.cgi")
    backend: BackendVariant = Field(default=BackendVariant.COOKIE_LOGIN)

    # Identity
    username: Optional[str] = Field(default=None, description="Login user for cookie_login backends")
    password: Optional[SecretStr] = Field(default=None)
    user_id: Optional[str] = Field(default=None, description="User id for connect_token backends")
    connect_token: Optional[SecretStr] = Field(default=None)
    ip_address: Optional[str] = Field(default=None)

    # Session and transport
    session_ttl_seconds: float = Field(default=300, gt=0)  # 5 minutes
    timeout_seconds: float = Field(default=30.0, gt=0)
    verify_ssl: bool = Field(default=True)
    user_agent: str = Field(default="ehr-connect/0.1")

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="simple")

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Invalid base_url format: {v}")
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed:
            raise ValueError(f"log_level must be one of {allowed}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        allowed = ["simple", "detailed", "json"]
        if v.lower() not in allowed:
            raise ValueError(f"log_format must be one of {allowed}")
        return v.lower()

    @property
    def principal_id(self) -> Optional[str]:
        if self.backend == BackendVariant.CONNECT_TOKEN:
            return self.user_id
        return self.username

    def to_client_config(self) -> ClientConfig:
        """Resolve settings into the immutable config the client is built from.

        Raises:
            ValueError: If credentials required by the backend variant are missing
        """
        return ClientConfig(
            base_url=self.base_url,
            principal_id=self.principal_id or "",
            backend=self.backend,
            secret=self.password.get_secret_value() if self.password else None,
            connect_token=self.connect_token.get_secret_value() if self.connect_token else None,
            ip_address=self.ip_address,
            session_ttl_seconds=self.session_ttl_seconds,
            timeout_seconds=self.timeout_seconds,
            verify_ssl=self.verify_ssl,
            user_agent=self.user_agent,
        )


@lru_cache()
def get_settings() -> EhrConnectSettings:
    """Get cached settings instance."""
    return EhrConnectSettings()
