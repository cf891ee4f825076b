"""Unit tests for catalogue tasks and their template data.

Covers:
- Duration filter parsing
- Price floor and clamping of template packages and hotels
- Prompt content for the search and details tasks
"""

import pytest

from tripsage.generation.catalogue import (
    HotelDetailsLookup,
    HotelDetailsTask,
    HotelSearch,
    HotelSearchTask,
    TravelPackageSearch,
    TravelPackageSearchTask,
)
from tripsage.generation.catalogue_fallbacks import hotels, parse_duration_range, travel_packages


@pytest.mark.parametrize(
    "duration,expected",
    [
        (None, (3, 14)),
        ("", (3, 14)),
        ("3-7", (3, 7)),
        ("15+", (15, 30)),
        ("10", (10, 10)),
        ("a week", (3, 14)),
    ],
)
def test_parse_duration_range(duration, expected):
    assert parse_duration_range(duration) == expected


def test_travel_packages_price_floor():
    packages = travel_packages("Kyoto", 200, 5000, None)["travelPackages"]

    assert len(packages) == 6
    assert packages[0]["price"] == 1000
    assert packages[0]["discounted_price"] == 850.0
    assert packages[1]["discounted_price"] is None


def test_travel_packages_base_capped_by_max_price():
    packages = travel_packages("Kyoto", 200, 800, None)["travelPackages"]
    assert packages[0]["price"] == 800


def test_travel_packages_durations_within_range():
    short = travel_packages("Kyoto", 1000, 5000, "3-5")["travelPackages"]
    assert all(3 <= p["duration"] <= 5 for p in short)

    long = travel_packages("Kyoto", 1000, 5000, "15+")["travelPackages"]
    assert all(p["duration"] == 15 for p in long)


def test_travel_packages_stable_ids_and_destination():
    first = travel_packages("Kyoto", 1000, 5000, "7")
    second = travel_packages("Kyoto", 1000, 5000, "7")

    assert first == second
    assert all(p["destination"] == "Kyoto" for p in first["travelPackages"])
    assert first["travelPackages"][0]["name"] == "Kyoto Explorer"


def test_hotels_priced_from_floor():
    result = hotels("Rome", 50, 400)["hotels"]

    assert len(result) == 6
    assert sorted(h["price_per_night"] for h in result) == [179, 199, 229, 249, 299, 349]
    assert all(h["location"] == "Rome, Country" for h in result)


def test_travel_package_prompt_includes_filters():
    task = TravelPackageSearchTask(
        TravelPackageSearch(destination="Kyoto", min_price=1500, max_price=3000, duration="5-8")
    )
    prompt = task.build_prompt()

    assert "Generate a list of 6 realistic travel packages to Kyoto as JSON." in prompt.user_prompt
    assert "Minimum price: $1500." in prompt.user_prompt
    assert "Maximum price: $3000." in prompt.user_prompt
    assert "Duration: 5-8 days." in prompt.user_prompt
    assert "price (number between 1500 and 3000)" in prompt.user_prompt
    assert task.required_keys == ("travelPackages",)


def test_travel_package_fallback_uses_defaults():
    task = TravelPackageSearchTask(TravelPackageSearch(destination="Kyoto"))
    packages = task.build_fallback()["travelPackages"]

    assert packages[0]["price"] == 1000


def test_hotel_search_prompt_and_fallback():
    task = HotelSearchTask(HotelSearch(location="Rome", rating=4.5))
    prompt = task.build_prompt()

    assert "Generate a list of 6 realistic hotels in Rome as JSON." in prompt.user_prompt
    assert "Minimum rating: 4.5 stars." in prompt.user_prompt
    assert "price_per_night (number between 100 and 500)" in prompt.user_prompt
    assert task.required_keys == ("hotels",)
    assert len(task.build_fallback()["hotels"]) == 6


def test_hotel_details_echoes_identity():
    task = HotelDetailsTask(HotelDetailsLookup(hotel_id="h-42", name="Casa Azul", location="Lisbon"))

    hotel = task.build_fallback()["hotel"]
    assert (hotel["id"], hotel["name"], hotel["location"]) == ("h-42", "Casa Azul", "Lisbon")

    prompt = task.build_prompt()
    assert 'hotel named "Casa Azul" in Lisbon' in prompt.user_prompt
    assert '- id: "h-42"' in prompt.user_prompt


@pytest.mark.parametrize("duration", ["inf", "1e999", "nan", "-inf"])
def test_parse_duration_range_non_finite_uses_defaults(duration):
    assert parse_duration_range(duration) == (3, 14)


def test_travel_packages_with_non_finite_duration():
    packages = travel_packages("Kyoto", 1000, 5000, "inf")["travelPackages"]
    assert all(3 <= p["duration"] <= 14 for p in packages)
