"""
Geolocation hook - asks the host for the user's position and tracks the request.

The hook moves between four states:

    idle -> loading -> success | failure
    any state -> idle (clear_location)

Missing capability and insecure pages short-circuit straight to failure
without entering loading.
"""

import asyncio
from typing import Any, Callable, Dict, List, Optional
from loguru import logger

from ..config import settings
from ..schemas.geolocation import (
    Coordinates,
    GeolocationFailure,
    GeolocationPositionError,
    GeolocationState,
    PositionOptions,
)
from ..utils.host import HostEnvironment


StateListener = Callable[[GeolocationState], None]


def default_position_options() -> PositionOptions:
    """Low accuracy, 10 second timeout, accept a fix up to 5 minutes old."""
    return PositionOptions(
        enable_high_accuracy=settings.geolocation_enable_high_accuracy,
        timeout=settings.geolocation_timeout_ms,
        maximum_age=settings.geolocation_maximum_age_ms,
    )


class GeolocationHook:
    """
    Owns one GeolocationState and the actions that change it.

    A request made while another is loading is ignored. Results that arrive
    after clear_location() belong to a cancelled request and are dropped.
    """

    def __init__(
        self,
        host: Optional[HostEnvironment] = None,
        options: Optional[PositionOptions] = None,
    ):
        """
        Args:
            host: Host environment providing the geolocation capability
            options: Position request options, defaults from settings
        """
        self.host = host or HostEnvironment()
        self.options = options or default_position_options()
        self._state = GeolocationState.idle()
        self._request_id = 0
        self._listeners: List[StateListener] = []
        self._waiters: List[asyncio.Future] = []

    # ============================================
    # State access
    # ============================================

    @property
    def state(self) -> GeolocationState:
        return self._state

    @property
    def latitude(self) -> Optional[float]:
        return self._state.latitude

    @property
    def longitude(self) -> Optional[float]:
        return self._state.longitude

    @property
    def error(self) -> Optional[str]:
        return self._state.error

    @property
    def loading(self) -> bool:
        return self._state.loading

    @property
    def has_location(self) -> bool:
        return self._state.has_location

    def as_dict(self) -> Dict[str, Any]:
        """Current state plus has_location, for rendering."""
        snapshot = self._state.model_dump()
        snapshot["has_location"] = self.has_location
        return snapshot

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Call listener with every new state.

        Returns:
            Function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set_state(self, state: GeolocationState) -> None:
        self._state = state

        if not state.loading:
            waiters, self._waiters = self._waiters, []
            for waiter in waiters:
                if not waiter.done():
                    waiter.set_result(state)

        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception as e:
                logger.exception(f"Geolocation listener raised: {e}")

    def _fail(self, failure: GeolocationFailure) -> None:
        self._set_state(GeolocationState.failed(failure))

    # ============================================
    # Actions
    # ============================================

    def request_location(self) -> None:
        """Ask the host for the current position."""
        if self._state.loading:
            logger.debug("Location request already in progress, ignoring")
            return

        capability = self.host.geolocation
        if capability is None:
            logger.warning("Geolocation capability not available")
            self._fail(GeolocationFailure.UNSUPPORTED)
            return

        if not self.host.is_secure_context(settings.secure_context_exempt_hosts):
            logger.warning(
                f"Refusing geolocation on insecure origin {self.host.protocol}//{self.host.hostname}"
            )
            self._fail(GeolocationFailure.INSECURE_CONTEXT)
            return

        self._request_id += 1
        request_id = self._request_id
        self._set_state(GeolocationState.pending())
        logger.info("Requesting location...")

        try:
            capability.get_current_position(
                lambda position: self._on_position(request_id, position),
                lambda error: self._on_error(request_id, error),
                self.options,
            )
        except Exception as e:
            logger.exception(f"Geolocation capability raised: {e}")
            if request_id == self._request_id and self._state.loading:
                self._fail(GeolocationFailure.UNKNOWN)

    def clear_location(self) -> None:
        """Reset to idle, abandoning any pending request."""
        self._request_id += 1
        self._set_state(GeolocationState.idle())

    async def acquire_location(self) -> GeolocationState:
        """
        Request the position and wait until the request settles.

        Returns:
            The settled state: located, failed, or idle if cleared meanwhile
        """
        waiter = asyncio.get_running_loop().create_future()
        self._waiters.append(waiter)
        self.request_location()

        if waiter.done():
            return waiter.result()
        return await waiter

    # ============================================
    # Host callbacks
    # ============================================

    def _on_position(self, request_id: int, position: Coordinates) -> None:
        if request_id != self._request_id:
            logger.warning("Discarding location result for a cleared request")
            return

        logger.info(f"Location acquired: {position.latitude}, {position.longitude}")
        self._set_state(GeolocationState.located(position.latitude, position.longitude))

    def _on_error(self, request_id: int, error: GeolocationPositionError) -> None:
        if request_id != self._request_id:
            logger.warning(f"Discarding geolocation error {error.code} for a cleared request")
            return

        logger.error(f"Geolocation error: {error.code} {error.message}")
        self._fail(GeolocationFailure.from_error_code(error.code))
