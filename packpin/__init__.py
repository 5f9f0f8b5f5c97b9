"""Python client for the Packpin shipment-tracking API.

Usage:
    from packpin import create_client
    from packpin.core.result import Failure, Success

    client = create_client("your-api-key")
    result = await client.get_tracking("058200005422993", "dpd")
    match result:
        case Success(value=tracking):
            print(tracking["status"])
        case Failure(error=error):
            print(error.to_dict())
"""

from packpin.core.result import Failure, Result, Success
from packpin.infrastructure.packpin.packpin_client import PackpinClient, create_client

__all__ = [
    "Failure",
    "PackpinClient",
    "Result",
    "Success",
    "create_client",
]

__version__ = "0.1.0"
