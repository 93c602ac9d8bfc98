from __future__ import annotations

from typing import Optional

from pydantic import Field, HttpUrl
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class CalendarApiSettings(BaseSettings):
    base_url: HttpUrl = Field(
        default="http://localhost:8080",
        description="Root URL of the team API (e.g., https://team.example.com)",
    )
    timeout: float = Field(default=15.0, gt=0, description="Request timeout in seconds")
    xsrf_cookie_name: str = Field(
        default="XSRF-TOKEN", description="Cookie holding the CSRF token"
    )
    xsrf_header_name: str = Field(
        default="X-XSRF-TOKEN", description="Header echoing the CSRF token"
    )
    email: Optional[str] = Field(default=None, description="Login email")
    password: Optional[str] = Field(default=None, description="Login password")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CALENDAR_API_",
        extra="ignore",
    )

    @property
    def root(self) -> str:
        """Base URL without a trailing slash, ready for path concatenation."""
        return str(self.base_url).rstrip("/")

    @property
    def has_credentials(self) -> bool:
        return bool(self.email and self.password)
