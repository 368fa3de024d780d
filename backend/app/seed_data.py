"""
City Info Backend — Seed Data
===============================

What:  The initial cities and points of interest.
Who:   Inserted by Alembic revision 002; the test-suite seeds the same rows.

Cities are never created through the API, so this is the only way they
enter the store.
"""

SEED_CITIES = [
    {
        "id": 1,
        "name": "New York City",
        "description": "The one with that big park.",
    },
    {
        "id": 2,
        "name": "Antwerp",
        "description": "The one with the cathedral that was never really finished.",
    },
    {
        "id": 3,
        "name": "Paris",
        "description": "The one with that big tower.",
    },
]

SEED_POINTS_OF_INTEREST = [
    {
        "id": 1,
        "city_id": 1,
        "name": "Central Park",
        "description": "The most visited urban park in the United States.",
    },
    {
        "id": 2,
        "city_id": 1,
        "name": "Empire State Building",
        "description": "A 102-story skyscraper located in Midtown Manhattan.",
    },
    {
        "id": 3,
        "city_id": 2,
        "name": "Cathedral",
        "description": "A Gothic style cathedral, conceived by architects Jan and Pieter Appelmans.",
    },
    {
        "id": 4,
        "city_id": 2,
        "name": "Antwerp Central Station",
        "description": "The finest example of railway architecture in Belgium.",
    },
    {
        "id": 5,
        "city_id": 3,
        "name": "Eiffel Tower",
        "description": "A wrought iron lattice tower on the Champ de Mars, named after engineer Gustave Eiffel.",
    },
    {
        "id": 6,
        "city_id": 3,
        "name": "The Louvre",
        "description": "The world's largest museum.",
    },
]
