"""Data schemas and models for dogadopt."""

from .dog_data import Dog, DogRow, DogSize, DogGender, RelatedRescue
from .rescue_data import Rescue
from .geolocation import (
    GeolocationState,
    GeolocationStatus,
    GeolocationFailure,
    GeolocationErrorCode,
    GeolocationPositionError,
    Coordinates,
    PositionOptions,
)

__all__ = [
    "Dog",
    "DogRow",
    "DogSize",
    "DogGender",
    "RelatedRescue",
    "Rescue",
    "GeolocationState",
    "GeolocationStatus",
    "GeolocationFailure",
    "GeolocationErrorCode",
    "GeolocationPositionError",
    "Coordinates",
    "PositionOptions",
]
