"""Configuration management for the Miniflux client.

Configuration comes from environment variables. pydantic-settings validates
it so a missing server URL fails at startup instead of on the first request.
"""

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Client configuration loaded from environment variables."""

    miniflux_url: str = Field(alias="MINIFLUX_URL")
    miniflux_token: SecretStr | None = Field(default=None, alias="MINIFLUX_TOKEN")
    miniflux_username: str | None = Field(default=None, alias="MINIFLUX_USERNAME")
    miniflux_password: SecretStr | None = Field(default=None, alias="MINIFLUX_PASSWORD")
    miniflux_timeout: float | None = Field(default=None, alias="MINIFLUX_TIMEOUT")

    model_config = SettingsConfigDict(
        populate_by_name=True,
        extra="ignore",
    )

    def credentials(self) -> dict[str, str]:
        """Return the credentials mapping accepted by MinifluxClient."""
        if self.miniflux_token is not None:
            return {"token": self.miniflux_token.get_secret_value()}
        if self.miniflux_username is not None and self.miniflux_password is not None:
            return {
                "username": self.miniflux_username,
                "password": self.miniflux_password.get_secret_value(),
            }
        return {}


def load_config() -> Config:
    """Load and validate config from environment. Raises on missing required vars."""
    return Config()
