"""Cloud region models."""

from .base import ApiModel


class Cloud(ApiModel):
    """A cloud region where services can be deployed."""

    cloud_description: str | None = None
    cloud_name: str | None = None
    geo_latitude: float | None = None
    geo_longitude: float | None = None
    geo_region: str | None = None


class CloudList(ApiModel):
    clouds: list[Cloud] = []
