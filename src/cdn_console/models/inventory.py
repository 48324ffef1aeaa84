from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class EndpointSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    host_name: str | None = Field(alias="hostName", default=None)


class ProfileSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    resource_group: str = Field(alias="resourceGroup")
    sku: str | None = None
    endpoints: list[EndpointSummary] = Field(default_factory=list)


class Inventory(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    profiles: list[ProfileSummary] = Field(default_factory=list)
    profile_exists: bool = Field(alias="profileExists", default=False)
    endpoint_exists: bool = Field(alias="endpointExists", default=False)
