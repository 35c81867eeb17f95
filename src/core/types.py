"""Shared typed models.

This module defines immutable data models used by the walkthrough
and CLI layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.constants import DEFAULT_WALKTHROUGH_PREFIX


@dataclass(frozen=True)
class Country:
    """Country value object.

    Attributes:
        name: Common English country name.
        capital: Capital city name.
        population: Approximate population count.
    """

    name: str
    capital: str
    population: int


@dataclass(frozen=True)
class WalkthroughOptions:
    """Inputs for the walkthrough examples.

    Attributes:
        names: Country names used by the string examples.
        numbers: Integers used by the numeric examples.
        countries: Country records used by the value-object examples.
        prefix: Name prefix used by the filter example.
    """

    names: tuple[str, ...]
    numbers: tuple[int, ...]
    countries: tuple[Country, ...]
    prefix: str = DEFAULT_WALKTHROUGH_PREFIX


@dataclass(frozen=True)
class WalkthroughResult:
    """One walkthrough example outcome.

    Attributes:
        title: Human-readable example description.
        value: Terminal operation result.
    """

    title: str
    value: object
