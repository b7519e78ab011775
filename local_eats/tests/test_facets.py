from local_eats.filters.facets import (
    RESERVATION_OPTIONS,
    build_city_cuisine_map,
    build_city_neighborhood_map,
    city_options,
    cuisine_options,
    extract_facets,
    name_options,
    neighborhood_options,
    price_range_options,
    reservation_options,
)
from local_eats.filters.models import FilterState
from local_eats.restaurants.grouper import flatten_groups

from .fixtures import bay_area_groups

GROUPS = bay_area_groups()
SF = FilterState(city=["San Francisco"])


def test_city_options_are_canonical_and_sorted():
    assert city_options(GROUPS) == ["Berkeley", "Oakland", "San Francisco"]


def test_neighborhood_options_for_city():
    assert neighborhood_options(GROUPS, SF) == ["Castro", "Mission", "North Beach"]


def test_neighborhood_options_without_city_span_everything():
    options = neighborhood_options(GROUPS, FilterState())
    assert options == ["Castro", "Fruitvale", "Mission", "North Beach", "Temescal"]


def test_neighborhood_options_constrained_by_cuisine():
    state = FilterState(city=["San Francisco"], cuisine_type=["Italian"])
    assert neighborhood_options(GROUPS, state) == ["Mission", "North Beach"]


def test_cuisine_options_merge_typos():
    assert cuisine_options(GROUPS, SF) == ["Italian", "Japanese", "Pizza"]


def test_cuisine_options_constrained_by_neighborhood():
    state = FilterState(city=["San Francisco"], neighborhood=["Mission"])
    assert cuisine_options(GROUPS, state) == ["Italian", "Japanese"]


def test_unmatched_cross_selection_does_not_empty_options():
    state = FilterState(city=["Oakland"], cuisine_type=["Japanese"])
    assert neighborhood_options(GROUPS, state) == ["Fruitvale", "Temescal"]


def test_price_ranges_sorted_by_dollar_count():
    assert price_range_options(GROUPS, FilterState()) == ["$", "$$", "$$$", "$$$$"]


def test_price_ranges_constrained_by_city_and_cuisine():
    assert price_range_options(GROUPS, FilterState(city=["Oakland"])) == ["$", "$$"]
    state = FilterState(city=["San Francisco"], cuisine_type=["Japanese"])
    assert price_range_options(GROUPS, state) == ["$$$$"]


def test_price_ranges_constrained_by_neighborhood():
    state = FilterState(city=["San Francisco"], neighborhood=["North Beach"])
    assert price_range_options(GROUPS, state) == ["$$"]


def test_reservation_options_without_city_lists_all_four():
    assert reservation_options(GROUPS, FilterState()) == list(RESERVATION_OPTIONS)


def test_reservation_options_keep_canonical_order():
    assert reservation_options(GROUPS, FilterState(city=["Oakland"])) == [
        "Walk-in only/no reservations",
        "Just pull up!",
    ]


def test_name_options_follow_city():
    assert name_options(GROUPS, FilterState(city=["Oakland"])) == ["Mumbai Masala", "Taqueria"]
    assert len(name_options(GROUPS, FilterState())) == len(GROUPS)


def test_extract_facets_bundles_every_dimension():
    facets = extract_facets(GROUPS, SF)
    assert facets.cities == ["Berkeley", "Oakland", "San Francisco"]
    assert facets.neighborhoods == ["Castro", "Mission", "North Beach"]
    assert facets.cuisine_types == ["Italian", "Japanese", "Pizza"]
    assert facets.price_ranges == ["$$", "$$$", "$$$$"]
    assert facets.reservation_options == ["Not required, but recommended", "Yes, required"]
    assert facets.names == ["Pasta Bella", "Sushi Zone", "Trattoria"]


def test_city_maps():
    records = flatten_groups(GROUPS)
    assert build_city_neighborhood_map(records)["San Francisco"] == ["Castro", "Mission", "North Beach"]
    assert build_city_cuisine_map(records)["Oakland"] == ["Indian", "Mexican", "Vegetarian"]
    assert build_city_neighborhood_map(records)["Berkeley"] == []
