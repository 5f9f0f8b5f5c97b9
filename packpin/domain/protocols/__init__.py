"""Domain protocols (structural interfaces)."""

from packpin.domain.protocols.tracking_service_protocol import TrackingServiceProtocol

__all__ = ["TrackingServiceProtocol"]
