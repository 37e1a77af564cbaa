from typing import List

from pydantic import BaseModel, ConfigDict, Field


class AssetLinkTarget(BaseModel):
    namespace: str = "android_app"
    package_name: str
    sha256_cert_fingerprints: List[str]


class AssetLinkStatement(BaseModel):
    relation: List[str]
    target: AssetLinkTarget


class AppLinkDetail(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    app_id: str = Field(alias="appID")
    paths: List[str]


class AppLinks(BaseModel):
    apps: List[str] = Field(default_factory=list)
    details: List[AppLinkDetail]


class AppSiteAssociation(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    app_links: AppLinks = Field(alias="applinks")
