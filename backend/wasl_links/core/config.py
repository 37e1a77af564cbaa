from typing import Literal

from pydantic import HttpUrl, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Self

from wasl_links.models.schemas.app_config import AppConfig


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Use the .env file in the working directory if there is one
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    PROJECT_NAME: str = "Wasl Links"
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    SENTRY_DSN: HttpUrl | None = None

    HOST: str = "0.0.0.0"
    PORT: int = 8080

    ANDROID_PACKAGE_NAME: str = "com.mhmd.wasl"
    ANDROID_SHA256_FINGERPRINT: str = (
        "FD:F7:95:1B:2E:25:BF:4C:19:6F:48:91:A1:04:8A:82:"
        "71:ED:08:62:30:E5:93:5B:E9:2D:09:9A:4E:48:62:AF"
    )
    IOS_TEAM_ID: str = "YOUR_TEAM_ID"
    IOS_BUNDLE_ID: str = "com.mhmd.wasl"
    IOS_APP_STORE_ID: str = "YOUR_APP_ID"

    # Derived from the package name / App Store ID when not set
    ANDROID_STORE_URL: str = ""
    IOS_STORE_URL: str = ""

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @model_validator(mode="after")
    def _default_store_urls(self) -> Self:
        if not self.ANDROID_STORE_URL:
            self.ANDROID_STORE_URL = (
                f"https://play.google.com/store/apps/details?id={self.ANDROID_PACKAGE_NAME}"
            )
        if not self.IOS_STORE_URL:
            self.IOS_STORE_URL = f"https://apps.apple.com/app/{self.IOS_APP_STORE_ID}"
        return self

    @property
    def app_config(self) -> AppConfig:
        return AppConfig(
            android_package=self.ANDROID_PACKAGE_NAME,
            android_fingerprint=self.ANDROID_SHA256_FINGERPRINT,
            ios_team_id=self.IOS_TEAM_ID,
            ios_bundle_id=self.IOS_BUNDLE_ID,
            ios_app_store_id=self.IOS_APP_STORE_ID,
            android_store_url=self.ANDROID_STORE_URL,
            ios_store_url=self.IOS_STORE_URL,
        )


settings = Settings()  # type: ignore
