"""
Rescue organisation data models.
"""

from typing import Optional
from pydantic import BaseModel, Field


class Rescue(BaseModel):
    """Rescue organisation listing."""

    id: str = Field(..., description="Unique rescue identifier")
    name: str = Field(..., description="Organisation name")
    type: str = Field(..., description="Organisation type, e.g. 'Full Rescue'")
    region: str = Field(..., description="Region covered")
    website: Optional[str] = Field(default=None)

    class Config:
        frozen = True
        extra = "ignore"
        json_schema_extra = {
            "example": {
                "id": "3f2e1d0c-aaaa-bbbb-cccc-ddddeeeeffff",
                "name": "Battersea",
                "type": "Full Rescue",
                "region": "London",
                "website": "https://www.battersea.org.uk"
            }
        }
