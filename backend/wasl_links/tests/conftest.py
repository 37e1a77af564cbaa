from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from wasl_links.api.deps import get_app_config
from wasl_links.main import app
from wasl_links.models.schemas.app_config import AppConfig

ANDROID_FINGERPRINT = (
    "FD:F7:95:1B:2E:25:BF:4C:19:6F:48:91:A1:04:8A:82:"
    "71:ED:08:62:30:E5:93:5B:E9:2D:09:9A:4E:48:62:AF"
)


@pytest.fixture
def app_config() -> AppConfig:
    return AppConfig(
        android_package="com.mhmd.wasl",
        android_fingerprint=ANDROID_FINGERPRINT,
        ios_team_id="ABCDE12345",
        ios_bundle_id="com.mhmd.wasl",
        ios_app_store_id="1234567890",
        android_store_url="https://play.google.com/store/apps/details?id=com.mhmd.wasl",
        ios_store_url="https://apps.apple.com/app/1234567890",
    )


@pytest.fixture
def client(app_config: AppConfig) -> Generator[TestClient, None, None]:
    app.dependency_overrides[get_app_config] = lambda: app_config
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
