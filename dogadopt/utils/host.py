"""
Host environment abstractions.

The location hook never touches a real browser. It talks to a
GeolocationCapability and a HostEnvironment, so tests can inject fakes that
answer synchronously.
"""

from typing import Callable, Iterable, Optional, Protocol

from ..schemas.geolocation import Coordinates, GeolocationPositionError, PositionOptions


SuccessCallback = Callable[[Coordinates], None]
ErrorCallback = Callable[[GeolocationPositionError], None]


class GeolocationCapability(Protocol):
    """Host-provided position lookup with success/error callbacks."""

    def get_current_position(
        self,
        success: SuccessCallback,
        error: ErrorCallback,
        options: PositionOptions,
    ) -> None:
        ...


class HostEnvironment:
    """Where the hook runs: its geolocation capability and page origin."""

    def __init__(
        self,
        geolocation: Optional[GeolocationCapability] = None,
        protocol: str = "https:",
        hostname: str = "localhost",
    ):
        """
        Args:
            geolocation: Position capability, None when the host has none
            protocol: Page protocol including the trailing colon
            hostname: Page hostname
        """
        self.geolocation = geolocation
        self.protocol = protocol
        self.hostname = hostname

    def is_secure_context(self, exempt_hosts: Iterable[str] = ()) -> bool:
        """True for HTTPS pages and for exempt local hostnames."""
        if self.protocol.lower() == "https:":
            return True
        hostname = self.hostname.lower().strip("[]")
        return hostname in {host.lower().strip("[]") for host in exempt_hosts}


class FixedPositionGeolocation:
    """Capability that always reports the same position, e.g. from configuration."""

    def __init__(self, latitude: float, longitude: float, accuracy: Optional[float] = None):
        self.coordinates = Coordinates(latitude=latitude, longitude=longitude, accuracy=accuracy)

    def get_current_position(
        self,
        success: SuccessCallback,
        error: ErrorCallback,
        options: PositionOptions,
    ) -> None:
        success(self.coordinates)
