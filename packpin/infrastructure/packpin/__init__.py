"""Packpin API clients package.

HTTP clients for the Packpin v2 REST API.
Uses API key authentication (Packpin-Api-Key header).

Reference:
    - https://packpin.com/docs/trackings/trackings-collection/
"""

from packpin.infrastructure.packpin.carriers_api import CarriersAPI
from packpin.infrastructure.packpin.packpin_client import PackpinClient, create_client
from packpin.infrastructure.packpin.trackings_api import TrackingsAPI

__all__ = [
    "CarriersAPI",
    "PackpinClient",
    "TrackingsAPI",
    "create_client",
]
