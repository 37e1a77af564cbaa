from .app_config import AppConfig
from .manifests import (
    AssetLinkTarget, AssetLinkStatement,
    AppLinkDetail, AppLinks, AppSiteAssociation,
)

__all__ = [
    "AppConfig",
    # Android Digital Asset Links
    "AssetLinkTarget", "AssetLinkStatement",
    # Apple App Site Association
    "AppLinkDetail", "AppLinks", "AppSiteAssociation",
]
