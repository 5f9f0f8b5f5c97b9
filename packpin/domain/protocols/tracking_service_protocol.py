"""TrackingServiceProtocol definition.

Structural interface of a shipment-tracking client. `PackpinClient` satisfies
it without inheriting from it (PEP 544 structural subtyping), so callers can
type against the protocol and substitute a fake in their own tests.

Response payloads are passed through untouched: their shape is owned by the
Packpin API, not by this client.
"""

from typing import Any, Protocol

from packpin.core.errors import PackpinError
from packpin.core.result import Result


class TrackingServiceProtocol(Protocol):
    """Operations offered by a shipment-tracking API client."""

    async def create_tracking(
        self,
        code: str,
        carrier: str,
        params: dict[str, Any] | None = None,
    ) -> Result[Any, PackpinError]:
        """Start tracking a shipment.

        Args:
            code: Tracking number.
            carrier: Carrier code (e.g. "dpd").
            params: Extra tracking fields (e.g. {"description": "..."}).
        """
        ...

    async def get_tracking(self, code: str, carrier: str) -> Result[Any, PackpinError]:
        """Fetch one tracking with its checkpoints."""
        ...

    async def get_trackings(
        self, options: dict[str, Any] | None = None
    ) -> Result[Any, PackpinError]:
        """List trackings in the account, filtered by query options."""
        ...

    async def update_tracking(
        self, code: str, carrier: str, description: str
    ) -> Result[Any, PackpinError]:
        """Change the description of a tracking."""
        ...

    async def delete_tracking(self, code: str, carrier: str) -> Result[Any, PackpinError]:
        """Stop tracking a shipment."""
        ...

    async def get_carriers(self) -> Result[Any, PackpinError]:
        """List all carriers the service recognizes."""
        ...

    async def detect_carriers(self, code: str) -> Result[Any, PackpinError]:
        """Guess which carriers a tracking number belongs to."""
        ...
