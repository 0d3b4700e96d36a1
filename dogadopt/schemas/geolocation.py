"""
Geolocation state and host callback payloads.
"""

from enum import Enum, IntEnum
from typing import Optional
from pydantic import BaseModel, Field, model_validator


class GeolocationStatus(str, Enum):
    """Phase of a location request."""
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILURE = "failure"


class GeolocationErrorCode(IntEnum):
    """Error codes reported by the host geolocation capability."""
    PERMISSION_DENIED = 1
    POSITION_UNAVAILABLE = 2
    TIMEOUT = 3


class GeolocationFailure(str, Enum):
    """Ways a location request can fail, each with a fixed user-facing message."""
    UNSUPPORTED = "unsupported"
    INSECURE_CONTEXT = "insecure_context"
    PERMISSION_DENIED = "permission_denied"
    POSITION_UNAVAILABLE = "position_unavailable"
    TIMEOUT = "timeout"
    UNKNOWN = "unknown"

    @property
    def message(self) -> str:
        return _FAILURE_MESSAGES[self]

    @classmethod
    def from_error_code(cls, code: int) -> "GeolocationFailure":
        """Map a host error code to a failure, UNKNOWN for anything unrecognised."""
        return _CODE_FAILURES.get(code, cls.UNKNOWN)


_FAILURE_MESSAGES = {
    GeolocationFailure.UNSUPPORTED: "Geolocation is not supported by your browser",
    GeolocationFailure.INSECURE_CONTEXT: "Geolocation requires a secure connection (HTTPS)",
    GeolocationFailure.PERMISSION_DENIED: (
        "Location permission denied. Please enable location access in your browser settings."
    ),
    GeolocationFailure.POSITION_UNAVAILABLE: "Location information is unavailable.",
    GeolocationFailure.TIMEOUT: "Location request timed out. Please try again.",
    GeolocationFailure.UNKNOWN: "Unable to retrieve your location",
}

_CODE_FAILURES = {
    GeolocationErrorCode.PERMISSION_DENIED: GeolocationFailure.PERMISSION_DENIED,
    GeolocationErrorCode.POSITION_UNAVAILABLE: GeolocationFailure.POSITION_UNAVAILABLE,
    GeolocationErrorCode.TIMEOUT: GeolocationFailure.TIMEOUT,
}


class PositionOptions(BaseModel):
    """Options passed with a position request."""

    enable_high_accuracy: bool = Field(default=False)
    timeout: int = Field(default=10000, ge=0, description="Timeout in milliseconds")
    maximum_age: int = Field(
        default=300000,
        ge=0,
        description="Accept a cached position up to this age in milliseconds"
    )


class Coordinates(BaseModel):
    """Position handed to the success callback."""

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    accuracy: Optional[float] = Field(default=None, ge=0, description="Accuracy in metres")


class GeolocationPositionError(BaseModel):
    """Error handed to the failure callback."""

    code: int
    message: str = ""


class GeolocationState(BaseModel):
    """
    Observable state of a location request.

    Exactly one of idle, loading, coordinates or error holds at a time.
    """

    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    error: Optional[str] = Field(default=None)
    loading: bool = Field(default=False)

    class Config:
        frozen = True

    @model_validator(mode="after")
    def check_exclusive(self) -> "GeolocationState":
        has_lat = self.latitude is not None
        has_lon = self.longitude is not None
        if has_lat != has_lon:
            raise ValueError("latitude and longitude must be set together")
        if has_lat and self.error is not None:
            raise ValueError("state cannot hold both coordinates and an error")
        if self.loading and (has_lat or self.error is not None):
            raise ValueError("loading state cannot hold coordinates or an error")
        return self

    @classmethod
    def idle(cls) -> "GeolocationState":
        return cls()

    @classmethod
    def pending(cls) -> "GeolocationState":
        return cls(loading=True)

    @classmethod
    def located(cls, latitude: float, longitude: float) -> "GeolocationState":
        return cls(latitude=latitude, longitude=longitude)

    @classmethod
    def failed(cls, failure: GeolocationFailure) -> "GeolocationState":
        return cls(error=failure.message)

    @property
    def has_location(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @property
    def status(self) -> GeolocationStatus:
        if self.loading:
            return GeolocationStatus.LOADING
        if self.has_location:
            return GeolocationStatus.SUCCESS
        if self.error is not None:
            return GeolocationStatus.FAILURE
        return GeolocationStatus.IDLE
