from __future__ import annotations

from local_eats.restaurants.grouper import group_restaurants_by_name
from local_eats.restaurants.models import RestaurantGroup, RestaurantRecord


def bay_area_groups() -> list[RestaurantGroup]:
    records = [
        RestaurantRecord(
            name="Mumbai Masala", city="Oakland", neighborhood="Temescal",
            cuisine_type="Indian", price_range="$$",
            reservation_needed="Walk-in only/no reservations",
        ),
        RestaurantRecord(
            name="Pasta Bella", city="San Francisco", neighborhood="Mission",
            cuisine_type="Italian", price_range="$$$", reservation_needed="Yes, required",
        ),
        RestaurantRecord(
            name="Trattoria", city="San Francisco, CA", neighborhood="North Beach",
            cuisine_type="Itallian/Pizza", price_range="$$",
            reservation_needed="Not required, but recommended",
        ),
        RestaurantRecord(
            name="Sushi Zone", city="SF", neighborhood="Mission/Castro",
            cuisine_type="Japanese", price_range="$$$$", reservation_needed="Yes, required",
        ),
        RestaurantRecord(
            name="mumbai masala", city="Oakland", neighborhood="Temescal",
            cuisine_type="Indian, Vegetarian", price_range="$$",
        ),
        RestaurantRecord(
            name="Taqueria", city="Oakland", neighborhood="Fruitvale",
            cuisine_type="Mexican", price_range="$", reservation_needed="Just pull up!",
        ),
        RestaurantRecord(name="Mystery Spot", city="Berkeley"),
    ]
    return group_restaurants_by_name(records)
