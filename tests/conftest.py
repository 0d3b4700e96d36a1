"""
Shared fixtures for dogadopt tests.
"""

import pytest

from dogadopt.utils.api_clients import SupabaseClient


SUPABASE_URL = "https://test-project.supabase.co"
SUPABASE_HOST = "test-project.supabase.co"


@pytest.fixture
def supabase():
    """Client pointed at a fake project; requests are intercepted with respx."""
    return SupabaseClient(url=SUPABASE_URL, api_key="test-anon-key")


@pytest.fixture
def dog_rows():
    """Raw dogs rows as PostgREST returns them, newest first."""
    return [
        {
            "id": "dog-003",
            "name": "Bramble",
            "breed": "Lurcher",
            "age": "3 years",
            "size": "Large",
            "gender": "Female",
            "location": "Bristol",
            "rescue": "Old Rescue Name",
            "rescue_id": "rescue-001",
            "image": "https://images.example.org/bramble.jpg",
            "description": "Loves a sofa.",
            "good_with_kids": True,
            "good_with_dogs": True,
            "good_with_cats": False,
            "created_at": "2024-05-03T10:00:00+00:00",
            "rescues": {
                "id": "rescue-001",
                "name": "Greyhound Gap",
                "region": "Midlands",
                "website": "https://www.greyhoundgap.org.uk",
            },
        },
        {
            "id": "dog-001",
            "name": "Alfie",
            "breed": "Jack Russell Terrier",
            "age": "8 years",
            "size": "Small",
            "gender": "Male",
            "location": "Leeds",
            "rescue": "Yorkshire Terrier Rescue",
            "rescue_id": None,
            "image": "https://images.example.org/alfie.jpg",
            "description": "A senior gent.",
            "good_with_kids": False,
            "good_with_dogs": False,
            "good_with_cats": True,
            "created_at": "2024-05-02T09:00:00+00:00",
            "rescues": None,
        },
        {
            "id": "dog-002",
            "name": "Cooper",
            "breed": "Labrador Retriever",
            "age": "18 months",
            "size": "Medium",
            "gender": "Male",
            "location": "Cardiff",
            "rescue": "Wales Lab Rescue",
            "rescue_id": "rescue-002",
            "image": "https://images.example.org/cooper.jpg",
            "description": "Bouncy.",
            "good_with_kids": True,
            "good_with_dogs": True,
            "good_with_cats": True,
            "created_at": "2024-05-01T08:00:00+00:00",
            "rescues": {
                "id": "rescue-002",
                "name": "Labrador Lifeline",
                "region": "Wales",
                "website": None,
            },
        },
    ]


@pytest.fixture
def rescue_rows():
    """Raw rescues rows, alphabetical."""
    return [
        {
            "id": "rescue-010",
            "name": "Battersea",
            "type": "Full Rescue",
            "region": "London",
            "website": "https://www.battersea.org.uk",
        },
        {
            "id": "rescue-001",
            "name": "Greyhound Gap",
            "type": "Breed Specific",
            "region": "Midlands",
            "website": None,
        },
        {
            "id": "rescue-002",
            "name": "Labrador Lifeline",
            "type": "Breed Specific",
            "region": "Wales",
            "website": "https://labradorlifeline.example",
        },
    ]
