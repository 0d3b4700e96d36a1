"""Data-fetching and location hooks consumed by the presentation layer."""

from .dog_listings import DogListingFetcher, fetch_dogs
from .rescue_listings import RescueListingFetcher, fetch_rescues
from .geolocation import GeolocationHook

__all__ = [
    "DogListingFetcher",
    "RescueListingFetcher",
    "GeolocationHook",
    "fetch_dogs",
    "fetch_rescues",
]
