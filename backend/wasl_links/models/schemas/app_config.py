from pydantic import BaseModel, ConfigDict, Field


class AppConfig(BaseModel):
    """Read-only application identity shared by every request handler."""

    model_config = ConfigDict(frozen=True)

    android_package: str = Field(min_length=1)
    android_fingerprint: str = Field(min_length=1)
    ios_team_id: str = Field(min_length=1)
    ios_bundle_id: str = Field(min_length=1)
    ios_app_store_id: str = Field(min_length=1)
    android_store_url: str = Field(min_length=1)
    ios_store_url: str = Field(min_length=1)
