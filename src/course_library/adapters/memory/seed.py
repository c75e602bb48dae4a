"""Sample authors and courses loaded into a fresh in-memory repository."""

from __future__ import annotations

import datetime

from course_library.domain.entities import Author, Course
from course_library.kernel.types.ids import EntityId


def sample_authors() -> list[Author]:
    """Return a new list of sample authors (fresh objects on every call)."""
    return [
        Author(
            EntityId("d28888e9-2ba9-473a-a40f-e38cb54f9b35"),
            "Berry", "Griffin Beak Eldritch", datetime.date(1650, 7, 23), "Ships",
            courses=[
                Course(
                    EntityId("5b1c2b4d-48c7-402a-80c3-cc796ad49c6b"),
                    "Commandeering a Ship Without Getting Caught",
                    "Commandeering a ship in rough waters isn't easy.  Commandeering it without getting caught is even harder.",
                ),
                Course(
                    EntityId("d8663e5e-7494-4f81-8739-6e0de1bea7ee"),
                    "Overthrowing Mutiny",
                    "In this course, the author provides tips to avoid, or, if needed, overthrow pirate mutiny.",
                ),
            ],
        ),
        Author(
            EntityId("da2fd609-d754-4feb-8acd-c4f9ff13ba96"),
            "Nancy", "Swashbuckler Rye", datetime.date(1668, 5, 21), "Rum",
            courses=[
                Course(
                    EntityId("d173e20d-159e-4127-9ce9-b0ac2564ad97"),
                    "Avoiding Brawls While Drinking as Much Rum as Possible",
                    "Every good pirate loves rum, but it also has a tendency to get you into trouble.",
                ),
            ],
        ),
        Author(
            EntityId("2902b665-1190-4c70-9915-b9c2d7680450"),
            "Eli", "Ivory Bones Sweet", datetime.date(1701, 12, 16), "Singing",
            courses=[
                Course(
                    EntityId("40ff5488-fdab-45b5-bc3a-14302d59869a"),
                    "Singalong Pirate Hits",
                    "In this course you'll learn how to sing all-time favourite pirate songs without sounding like you actually know the words or how to hold a note.",
                ),
            ],
        ),
        Author(
            EntityId("102b566b-ba1f-404c-b2df-e2cde39ade09"),
            "Arnold", "Oarsman Hunt", datetime.date(1702, 3, 6), "Singing",
        ),
        Author(
            EntityId("5b3621c0-7b12-4e80-9c8b-3398cba7ee05"),
            "Seabury", "Toxic Reyson", datetime.date(1690, 11, 23), "Maps",
        ),
        Author(
            EntityId("2aadd2df-7caf-45ab-9355-7f6332985a87"),
            "Rutherford", "Fearless Cloven", datetime.date(1723, 4, 5), "General debauchery",
        ),
        Author(
            EntityId("2ee49fe3-edf2-4f91-8409-3eb25ce6ca51"),
            "Atherton", "Crow Ravenweed", datetime.date(1721, 10, 11), "Rum",
        ),
    ]


__all__ = ["sample_authors"]
