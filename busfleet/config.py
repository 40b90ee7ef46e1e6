# busfleet/config.py
import os
from dataclasses import dataclass
from pydantic_settings import BaseSettings
from pydantic import Field
from pydantic_settings import SettingsConfigDict
from typing import List
from functools import lru_cache

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore", populate_by_name=True)
    # Application Settings
    APP_NAME: str = "Bus Fleet API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    DOCS_ENABLED: bool = True

    # Server Settings
    HOST: str = "0.0.0.0"
    PORT: int = int(os.environ.get("PORT", 3000))

    # Database Settings
    DATABASE_URL: str = os.environ.get("DATABASE_URL", "sqlite:///./busfleet.db")

    # Security Settings
    SECRET_KEY: str = Field(default="your_jwt_secret", alias="JWT_SECRET")
    ALGORITHM: str = "HS256"

    # CORS Settings (comma-separated to avoid JSON parsing in env)
    ALLOWED_ORIGINS: str = "https://college-bus-tracking.vercel.app,http://localhost:3000"
    CORS_ALLOW_CREDENTIALS: bool = True

    # Logging Settings
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Base URL for profile picture links
    BASE_URL: str = "http://localhost:3000"

    # Client-facing settings (shared with the dashboard build)
    API_URL: str = Field(default="http://localhost:3000/api", alias="VITE_API_URL")
    VAPID_PUBLIC_KEY: str = Field(default="", alias="VITE_VAPID_PUBLIC_KEY")

    # Web push
    VAPID_PRIVATE_KEY: str = ""
    VAPID_SUBJECT: str = "mailto:transport@yourcollege.edu"
    DEFAULT_ICON: str = "/icons/bus-icon.png"
    BADGE_ICON: str = "/icons/bus-badge.png"

    # Helper methods for list envs
    def _split_csv(self, value: str) -> List[str]:
        if value is None:
            return []
        value = value.strip()
        if value == "":
            return []
        return [item.strip() for item in value.split(",")]

    @property
    def allowed_origins_list(self) -> List[str]:
        return self._split_csv(self.ALLOWED_ORIGINS)


@dataclass(frozen=True)
class ClientConfig:
    """Values the dashboard components need, built once at startup and passed explicitly."""
    api_url: str
    vapid_public_key: str
    agent_script_url: str = "/sw.js"
    default_icon: str = "/icons/bus-icon.png"
    badge_icon: str = "/icons/bus-badge.png"

    @classmethod
    def from_settings(cls, s: Settings) -> "ClientConfig":
        return cls(
            api_url=s.API_URL.rstrip("/"),
            vapid_public_key=s.VAPID_PUBLIC_KEY,
            default_icon=s.DEFAULT_ICON,
            badge_icon=s.BADGE_ICON,
        )


@lru_cache()
def get_settings() -> Settings:
    return Settings()

settings: Settings = get_settings()
