"""
Verification manifests for Android App Links and iOS Universal Links.

Google Play and Apple fetch these documents and match them by exact key
names, so the field aliases on the schemas are part of the contract.

Documentation:
    https://developer.android.com/training/app-links/verify-android-applinks
    https://developer.apple.com/documentation/xcode/supporting-associated-domains
"""
from typing import List, Union

from pydantic import TypeAdapter

from wasl_links.models.schemas.app_config import AppConfig
from wasl_links.models.schemas.manifests import (
    AppLinkDetail,
    AppLinks,
    AppSiteAssociation,
    AssetLinkStatement,
    AssetLinkTarget,
)

HANDLE_ALL_URLS = "delegate_permission/common.handle_all_urls"
ANDROID_NAMESPACE = "android_app"

# Path families the native app claims; order matters to the AASA consumers
APP_LINK_PATHS = ["/store/*", "/item/*", "/combo/*"]

_asset_links_adapter = TypeAdapter(List[AssetLinkStatement])


def build_asset_links(cfg: AppConfig) -> List[AssetLinkStatement]:
    """
    Build the Digital Asset Links statement list for the configured package.

    Args:
        cfg: Application identity

    Returns:
        A single ``handle_all_urls`` statement carrying one certificate fingerprint
    """
    return [
        AssetLinkStatement(
            relation=[HANDLE_ALL_URLS],
            target=AssetLinkTarget(
                namespace=ANDROID_NAMESPACE,
                package_name=cfg.android_package,
                sha256_cert_fingerprints=[cfg.android_fingerprint],
            ),
        )
    ]


def build_app_site_association(cfg: AppConfig) -> AppSiteAssociation:
    """
    Build the apple-app-site-association document for the configured bundle.
    """
    return AppSiteAssociation(
        app_links=AppLinks(
            apps=[],
            details=[
                AppLinkDetail(
                    app_id=f"{cfg.ios_team_id}.{cfg.ios_bundle_id}",
                    paths=list(APP_LINK_PATHS),
                )
            ],
        )
    )


def dump_document(document: Union[List[AssetLinkStatement], AppSiteAssociation]) -> bytes:
    """Serialize a manifest to compact JSON using the wire key names."""
    if isinstance(document, AppSiteAssociation):
        return document.model_dump_json(by_alias=True).encode("utf-8")
    return _asset_links_adapter.dump_json(document, by_alias=True)
