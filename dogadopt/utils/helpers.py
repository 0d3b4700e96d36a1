"""
Helper utilities for dogadopt.
"""

from typing import Any, Dict, List

from ..schemas.dog_data import Dog, DogRow, DogGender, DogSize
from ..schemas.rescue_data import Rescue


def map_dog_row(row: DogRow) -> Dog:
    """
    Project a raw dogs row into a Dog listing.

    The joined rescue's name wins over the row's denormalised rescue column,
    and supplies the website. Without a join the denormalised name is used
    and the website stays unset.

    Args:
        row: Validated row from the dogs table

    Returns:
        Dog listing
    """
    related = row.rescues

    return Dog(
        id=row.id,
        name=row.name,
        breed=row.breed,
        age=row.age,
        size=DogSize(row.size),
        gender=DogGender(row.gender),
        location=row.location,
        rescue=related.name if related and related.name else row.rescue,
        rescue_website=related.website if related else None,
        image=row.image,
        good_with_kids=row.good_with_kids,
        good_with_dogs=row.good_with_dogs,
        good_with_cats=row.good_with_cats,
        description=row.description,
    )


def parse_dog_rows(rows: List[Dict[str, Any]]) -> List[Dog]:
    """Validate and project every row, preserving order."""
    return [map_dog_row(DogRow.model_validate(row)) for row in rows]


def parse_rescue_rows(rows: List[Dict[str, Any]]) -> List[Rescue]:
    """Validate every row, preserving order."""
    return [Rescue.model_validate(row) for row in rows]


def format_dog_summary(dog: Dog) -> str:
    """One-line summary of a dog for terminal output."""
    compatible = [
        label
        for label, ok in (
            ("kids", dog.good_with_kids),
            ("dogs", dog.good_with_dogs),
            ("cats", dog.good_with_cats),
        )
        if ok
    ]
    good_with = f" | good with {', '.join(compatible)}" if compatible else ""
    return (
        f"{dog.name} - {dog.breed}, {dog.age}, {dog.size.value} {dog.gender.value.lower()} "
        f"| {dog.location} | {dog.rescue}{good_with}"
    )


def format_rescue_summary(rescue: Rescue) -> str:
    """One-line summary of a rescue for terminal output."""
    website = f" | {rescue.website}" if rescue.website else ""
    return f"{rescue.name} ({rescue.type}) - {rescue.region}{website}"
