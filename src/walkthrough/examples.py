"""Named example pipelines over the walkthrough inputs.

Each example builds one pipeline, runs exactly one terminal operation
and returns a titled result for display.
"""

from __future__ import annotations

import operator
from dataclasses import replace
from typing import Callable

from core.constants import DEFAULT_JOIN_SEPARATOR
from core.logging_config import get_logger
from core.types import Country, WalkthroughOptions, WalkthroughResult
from stream.pipeline import Pipeline
from walkthrough.sample_data import (
    LARGE_POPULATION_THRESHOLD,
    LONG_NAME_LENGTH,
    SAMPLE_COUNTRIES,
    SAMPLE_COUNTRY_NAMES,
    SAMPLE_NUMBERS,
)

_LOGGER = get_logger(__name__)


def build_default_options(
    names: tuple[str, ...] | None = None,
    prefix: str | None = None,
) -> WalkthroughOptions:
    """Build walkthrough options over the bundled sample data.

    Args:
        names: Optional replacement for the sample country names.
        prefix: Optional name prefix override for the filter example.

    Returns:
        Options referencing the sample names, numbers and countries.
    """
    options = WalkthroughOptions(
        names=SAMPLE_COUNTRY_NAMES,
        numbers=SAMPLE_NUMBERS,
        countries=SAMPLE_COUNTRIES,
    )
    if names is not None:
        options = replace(options, names=names)
    if prefix is not None:
        options = replace(options, prefix=prefix)
    return options


def run_walkthrough(options: WalkthroughOptions) -> list[WalkthroughResult]:
    """Run every example pipeline in display order.

    Args:
        options: Walkthrough inputs.

    Returns:
        One titled result per example.
    """
    results = [example(options) for example in _EXAMPLES]
    _LOGGER.info(
        "walkthrough_completed",
        example_count=len(results),
        name_count=len(options.names),
        prefix=options.prefix,
    )
    return results


def _prefixed_names_upper(options: WalkthroughOptions) -> WalkthroughResult:
    prefix = options.prefix
    value = (
        Pipeline.of(options.names)
        .filter(lambda name: name.startswith(prefix))
        .map(str.upper)
        .collect_to_list()
    )
    return WalkthroughResult(f"names starting with '{prefix}', upper-cased", value)


def _number_sum(options: WalkthroughOptions) -> WalkthroughResult:
    value = Pipeline.of(options.numbers).reduce(operator.add)
    return WalkthroughResult("sum of numbers", value)


def _even_squares(options: WalkthroughOptions) -> WalkthroughResult:
    value = (
        Pipeline.of(options.numbers)
        .filter(lambda number: number % 2 == 0)
        .map(lambda number: number * number)
        .to_array()
    )
    return WalkthroughResult("squares of even numbers", value)


def _distinct_name_lengths(options: WalkthroughOptions) -> WalkthroughResult:
    lengths = Pipeline.of(options.names).map(len).collect_to_set()
    return WalkthroughResult("distinct name lengths", sorted(lengths))


def _name_count(options: WalkthroughOptions) -> WalkthroughResult:
    return WalkthroughResult("number of names", Pipeline.of(options.names).count())


def _any_long_name(options: WalkthroughOptions) -> WalkthroughResult:
    value = Pipeline.of(options.names).any_match(lambda name: len(name) > LONG_NAME_LENGTH)
    return WalkthroughResult(f"any name longer than {LONG_NAME_LENGTH} characters", value)


def _all_positive(options: WalkthroughOptions) -> WalkthroughResult:
    value = Pipeline.of(options.numbers).all_match(lambda number: number > 0)
    return WalkthroughResult("all numbers positive", value)


def _no_blank_names(options: WalkthroughOptions) -> WalkthroughResult:
    value = Pipeline.of(options.names).none_match(lambda name: not name.strip())
    return WalkthroughResult("no blank names", value)


def _first_alphabetical(options: WalkthroughOptions) -> WalkthroughResult:
    value = Pipeline.of(options.names).sorted(key=str.lower).find_first()
    return WalkthroughResult("first name alphabetically", value)


def _joined_names(options: WalkthroughOptions) -> WalkthroughResult:
    value = Pipeline.of(options.names).joining(DEFAULT_JOIN_SEPARATOR, "[", "]")
    return WalkthroughResult("joined names", value)


def _capitals(options: WalkthroughOptions) -> WalkthroughResult:
    value = Pipeline.of(options.countries).collect_to_map(
        lambda country: country.name,
        lambda country: country.capital,
    )
    return WalkthroughResult("capital by country", value)


def _large_countries(options: WalkthroughOptions) -> WalkthroughResult:
    value = (
        Pipeline.of(options.countries)
        .filter(lambda country: country.population > LARGE_POPULATION_THRESHOLD)
        .map(_country_name)
        .collect_to_list()
    )
    return WalkthroughResult(
        f"countries above {LARGE_POPULATION_THRESHOLD:,} people", value
    )


def _most_populous(options: WalkthroughOptions) -> WalkthroughResult:
    country = Pipeline.of(options.countries).max(key=lambda item: item.population)
    return WalkthroughResult("most populous country", _optional_name(country))


def _least_populous(options: WalkthroughOptions) -> WalkthroughResult:
    country = Pipeline.of(options.countries).min(key=lambda item: item.population)
    return WalkthroughResult("least populous country", _optional_name(country))


def _total_population(options: WalkthroughOptions) -> WalkthroughResult:
    value = Pipeline.of(options.countries).map(lambda item: item.population).sum()
    return WalkthroughResult("total population", value)


def _countries_by_initial(options: WalkthroughOptions) -> WalkthroughResult:
    groups = Pipeline.of(options.countries).group_by(lambda country: country.name[:1])
    value = {
        initial: [country.name for country in members]
        for initial, members in groups.items()
    }
    return WalkthroughResult("countries by initial", value)


def _country_name(country: Country) -> str:
    return country.name


def _optional_name(country: Country | None) -> str | None:
    return country.name if country is not None else None


_EXAMPLES: tuple[Callable[[WalkthroughOptions], WalkthroughResult], ...] = (
    _prefixed_names_upper,
    _number_sum,
    _even_squares,
    _distinct_name_lengths,
    _name_count,
    _any_long_name,
    _all_positive,
    _no_blank_names,
    _first_alphabetical,
    _joined_names,
    _capitals,
    _large_countries,
    _most_populous,
    _least_populous,
    _total_population,
    _countries_by_initial,
)
