"""
dogadopt - Data layer for the dogadopt.co.uk adoption listings site

This package contains the hooks the site's pages use to list dogs and rescues
from Supabase and to find the visitor's location.
"""

__version__ = "1.0.0"

from .exceptions import FetchError
from .hooks import DogListingFetcher, RescueListingFetcher, GeolocationHook

__all__ = [
    "FetchError",
    "DogListingFetcher",
    "RescueListingFetcher",
    "GeolocationHook",
]
