"""Fixed sample inputs for the walkthrough examples."""

from __future__ import annotations

from core.types import Country

SAMPLE_COUNTRY_NAMES = ("Bangladesh", "Canada", "India", "Pakistan", "USA")
SAMPLE_NUMBERS = (1, 2, 3, 4, 5)
SAMPLE_COUNTRIES = (
    Country(name="Bangladesh", capital="Dhaka", population=171_000_000),
    Country(name="Canada", capital="Ottawa", population=40_000_000),
    Country(name="India", capital="New Delhi", population=1_430_000_000),
    Country(name="Pakistan", capital="Islamabad", population=240_000_000),
    Country(name="USA", capital="Washington, D.C.", population=335_000_000),
)
LARGE_POPULATION_THRESHOLD = 200_000_000
LONG_NAME_LENGTH = 8
