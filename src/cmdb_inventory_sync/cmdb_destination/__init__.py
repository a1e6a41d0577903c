"""CMDB destination exports."""

from .destination_client import DestinationApi, DestinationApiClient, DestinationApiError

__all__ = ["DestinationApi", "DestinationApiClient", "DestinationApiError"]
