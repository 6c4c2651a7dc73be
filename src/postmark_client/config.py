from __future__ import annotations

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientOptions(BaseSettings):
    """Connection options shared by every Postmark client.

    Environment variables use the prefix `POSTMARK_`, e.g. ``POSTMARK_REQUEST_HOST``.
    ``.env`` file in project root is also supported.
    """

    # Endpoint
    use_https: bool = True
    request_host: str = "api.postmarkapp.com"

    # Timing
    timeout: float = 180.0  # seconds

    # Credentials (used only when no token is passed explicitly)
    account_token: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="POSTMARK_",
        extra="ignore",
    )

    @property
    def base_url(self) -> str:
        scheme = "https" if self.use_https else "http"
        return f"{scheme}://{self.request_host}"


settings = ClientOptions()  # singleton instance
