"""
Dog listing data models and schemas.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class DogSize(str, Enum):
    """Dog size categories."""
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"


class DogGender(str, Enum):
    """Dog gender."""
    MALE = "Male"
    FEMALE = "Female"


class RelatedRescue(BaseModel):
    """Rescue record embedded in a dog row through the rescue_id foreign key."""

    id: str
    name: str
    region: str
    website: Optional[str] = None

    class Config:
        extra = "ignore"


class DogRow(BaseModel):
    """Raw row from the dogs table, including the embedded rescues join."""

    id: str
    name: str
    breed: str
    age: str
    size: str
    gender: str
    location: str
    rescue: str = Field(..., description="Denormalised rescue name")
    rescue_id: Optional[str] = Field(default=None)
    image: str
    description: str
    good_with_kids: bool
    good_with_dogs: bool
    good_with_cats: bool
    created_at: Optional[datetime] = Field(default=None)
    rescues: Optional[RelatedRescue] = Field(
        default=None,
        description="Related rescue, null when rescue_id matches nothing"
    )

    class Config:
        extra = "ignore"


class Dog(BaseModel):
    """Dog listing as shown on the site."""

    # Identifiers
    id: str = Field(..., description="Unique dog identifier")

    # Basic information
    name: str = Field(..., description="Dog name")
    breed: str = Field(..., description="Breed")
    age: str = Field(..., description="Free-text age, e.g. '2 years'")
    size: DogSize = Field(..., description="Size category")
    gender: DogGender = Field(..., description="Gender")
    location: str = Field(..., description="Where the dog is being fostered")

    # Rescue
    rescue: str = Field(..., min_length=1, description="Rescue organisation name")
    rescue_website: Optional[str] = Field(default=None)

    # Media
    image: str = Field(..., description="Image reference")

    # Compatibility
    good_with_kids: bool = Field(default=False)
    good_with_dogs: bool = Field(default=False)
    good_with_cats: bool = Field(default=False)

    # Description
    description: str = Field(default="", description="Detailed description")

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "id": "8c1f6d0e-1a2b-4c3d-9e8f-001122334455",
                "name": "Bramble",
                "breed": "Lurcher",
                "age": "3 years",
                "size": "Large",
                "gender": "Female",
                "location": "Bristol",
                "rescue": "Greyhound Gap",
                "rescue_website": "https://www.greyhoundgap.org.uk",
                "image": "https://images.example.org/bramble.jpg",
                "good_with_kids": True,
                "good_with_dogs": True,
                "good_with_cats": False,
                "description": "Bramble loves a sofa and a long walk in that order."
            }
        }
