"""Catalogue generation tasks: travel package search, hotel search and hotel details."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from tripsage.generation import catalogue_fallbacks as fallbacks
from tripsage.generation.tasks import GenerationTask, render_shape
from tripsage.generation.types import PromptPair, optional_number

CATALOGUE_SYSTEM_PROMPT = (
    "You are a travel catalogue assistant for TripSage. You produce realistic, "
    "bookable-looking travel products. Respond only with JSON in the specified format."
)
JSON_ONLY = "Return ONLY valid JSON without any explanations, prefixes, or markdown formatting."


@dataclass(frozen=True)
class TravelPackageSearch:
    destination: str
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    duration: Optional[str] = None


@dataclass(frozen=True)
class HotelSearch:
    location: str
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    rating: Optional[float] = None


@dataclass(frozen=True)
class HotelDetailsLookup:
    hotel_id: str
    name: str
    location: str


def _number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


class TravelPackageSearchTask(GenerationTask):
    """Generate six travel packages for a destination."""

    label = "travel_packages"

    def __init__(self, search: TravelPackageSearch):
        self.search = search

    @property
    def shape(self) -> Dict[str, Any]:
        return {"travelPackages": ["... array of travel package objects ..."]}

    def build_prompt(self) -> PromptPair:
        s = self.search
        low = _number(s.min_price) if s.min_price is not None else "1000"
        high = _number(s.max_price) if s.max_price is not None else "5000"

        filters = []
        if s.min_price is not None:
            filters.append(f"Minimum price: ${_number(s.min_price)}.")
        if s.max_price is not None:
            filters.append(f"Maximum price: ${_number(s.max_price)}.")
        if s.duration:
            filters.append(f"Duration: {s.duration} days.")

        fields = "\n".join([
            "- id (UUID string)",
            "- name (package name)",
            "- description (3-4 sentences about the package)",
            "- destination (city, country or region)",
            f"- price (number between {low} and {high})",
            "- discounted_price (optional, number less than price or null if no discount)",
            f"- duration (number of days, between {s.duration or '5-15'})",
            "- max_participants (group size, number)",
            "- rating (number between 3.5 and 5.0)",
            "- highlights (array of 4-5 bullet points)",
            "- itinerary (array of day objects with title, description, and activities array)",
            "- included_services (array of 5-6 items included in the package)",
            "- excluded_services (array of 4-5 items not included)",
            "- images (array of 3 placeholder image URLs from unsplash.com)",
            "- categories (array of 2-3 categories like \"Adventure\", \"Cultural\", \"Luxury\")",
            "- features (array of 2-3 features like \"English Guide\", \"All-Inclusive\")",
            "- accommodation_type (string describing the accommodations)",
            "- activity_level (string like \"Easy\", \"Moderate\", \"Challenging\")",
            "- availability (string describing when the package is available)",
        ])
        shape = render_shape(self.shape)

        user_prompt = (
            f"Generate a list of 6 realistic travel packages to {s.destination} as JSON.\n"
            + "".join(f"{line}\n" for line in filters)
            + f"\nEach travel package should include:\n{fields}\n\n"
            + f"{JSON_ONLY}\nThe response should look like: {shape}"
        )
        return PromptPair(CATALOGUE_SYSTEM_PROMPT, user_prompt, shape)

    def build_fallback(self) -> Dict[str, Any]:
        s = self.search
        return fallbacks.travel_packages(
            s.destination,
            optional_number(s.min_price, 1000),
            optional_number(s.max_price, 5000),
            s.duration,
        )


class HotelSearchTask(GenerationTask):
    """Generate six hotels for a location."""

    label = "hotel_search"

    def __init__(self, search: HotelSearch):
        self.search = search

    @property
    def shape(self) -> Dict[str, Any]:
        return {"hotels": ["... array of hotel objects ..."]}

    def build_prompt(self) -> PromptPair:
        s = self.search
        low = _number(s.min_price) if s.min_price is not None else "100"
        high = _number(s.max_price) if s.max_price is not None else "500"

        filters = []
        if s.min_price is not None:
            filters.append(f"Minimum price per night: ${_number(s.min_price)}.")
        if s.max_price is not None:
            filters.append(f"Maximum price per night: ${_number(s.max_price)}.")
        if s.rating is not None:
            filters.append(f"Minimum rating: {_number(s.rating)} stars.")

        fields = "\n".join([
            "- id (UUID string)",
            "- name (hotel name)",
            "- location (city, country)",
            "- address (street address)",
            "- description (3-4 sentences about the hotel)",
            f"- price_per_night (number between {low} and {high})",
            "- rating (number between 3.5 and 5.0)",
            "- amenities (array of 5-7 amenities)",
            "- images (array of 3 placeholder image URLs from unsplash.com)",
            "- room_types (array of 3 room type names)",
        ])
        shape = render_shape(self.shape)

        user_prompt = (
            f"Generate a list of 6 realistic hotels in {s.location} as JSON.\n"
            + "".join(f"{line}\n" for line in filters)
            + f"\nEach hotel should include:\n{fields}\n\n"
            + f"{JSON_ONLY}\nThe response should look like: {shape}"
        )
        return PromptPair(CATALOGUE_SYSTEM_PROMPT, user_prompt, shape)

    def build_fallback(self) -> Dict[str, Any]:
        s = self.search
        return fallbacks.hotels(
            s.location,
            optional_number(s.min_price, 100),
            optional_number(s.max_price, 500),
        )


class HotelDetailsTask(GenerationTask):
    """Generate the detail page record for one hotel."""

    label = "hotel_details"

    def __init__(self, lookup: HotelDetailsLookup):
        self.lookup = lookup

    @property
    def shape(self) -> Dict[str, Any]:
        return {"hotel": {"...": "hotel object"}}

    def build_prompt(self) -> PromptPair:
        h = self.lookup
        shape = render_shape(self.shape)
        user_prompt = (
            f'Generate detailed information for a hotel named "{h.name}" in {h.location} as JSON.\n\n'
            f"The hotel should include these properties:\n"
            f'- id: "{h.hotel_id}"\n'
            f'- name: "{h.name}"\n'
            f'- location: "{h.location}"\n'
            f"- address: (realistic address in {h.location})\n"
            f"- description: (detailed 5-7 sentence description)\n"
            f"- price_per_night: (realistic price between 100-500)\n"
            f"- rating: (between 3.5 and 5.0)\n"
            f"- reviews_count: (between 50 and 500)\n"
            f"- amenities: (array of 8-10 detailed amenities)\n"
            f"- images: (array of 5 placeholder image URLs from unsplash.com)\n"
            f"- room_types: (array of objects with id, name, description, price_per_night, "
            f"capacity, amenities and images (2 image URLs))\n"
            f"- nearby_attractions: (array of 3-5 nearby attractions with name and short description)\n"
            f"- policies: (object with check_in_time, check_out_time, cancellation_policy, etc.)\n\n"
            f"{JSON_ONLY}\nThe response should look like: {shape}"
        )
        return PromptPair(CATALOGUE_SYSTEM_PROMPT, user_prompt, shape)

    def build_fallback(self) -> Dict[str, Any]:
        h = self.lookup
        return fallbacks.hotel_details(h.hotel_id, h.name, h.location)
