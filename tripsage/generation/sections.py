"""Destination detail sections.

Each Section member carries its three templates in one SectionTemplates
record: the instruction, the example shape and the fallback. The registry is
checked for exhaustiveness at import time.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional

from tripsage.generation import destination_fallbacks as fallbacks
from tripsage.generation.errors import UnknownSectionError
from tripsage.generation.tasks import GenerationTask, render_shape
from tripsage.generation.types import DateRange, PromptPair


class Section(str, Enum):
    OVERVIEW = "overview"
    ACCOMMODATION = "accommodation"
    FOOD = "food"
    TRANSPORTATION = "transportation"
    EVENTS = "events"
    BUDGET = "budget"
    ITINERARY = "itinerary"
    TIPS = "tips"
    SHOPPING = "shopping"

    @classmethod
    def parse(cls, value: str) -> "Section":
        """Section for a request key. Raises UnknownSectionError for unknown keys."""
        try:
            return cls(value)
        except ValueError:
            raise UnknownSectionError(value) from None


@dataclass(frozen=True)
class DestinationRequest:
    """Parameters of one destination-details request."""
    destination: str
    section: Section
    date_range: Optional[DateRange] = None
    guests: int = 1

    def __post_init__(self):
        if self.guests < 1:
            raise ValueError("guests must be at least 1")

    @property
    def duration(self) -> Optional[int]:
        return self.date_range.duration_days if self.date_range else None

    @property
    def people(self) -> str:
        return "person" if self.guests == 1 else "people"

    @property
    def traveler_type(self) -> str:
        if self.guests == 1:
            return "solo travelers"
        return "groups" if self.guests > 2 else "couples"


@dataclass(frozen=True)
class SectionTemplates:
    instruction: Callable[[DestinationRequest], str]
    shape: Dict[str, Any]
    fallback: Callable[[DestinationRequest], Dict[str, Any]]


def _overview(r: DestinationRequest) -> str:
    weather = (
        f"the dates {r.date_range.start} to {r.date_range.end}"
        if r.date_range else "typical weather"
    )
    return (
        f"Provide an overview of {r.destination} as a travel destination. Include general "
        f"information, top attractions, cultural highlights, weather for {weather}, "
        f"and any safety tips."
    )


def _accommodation(r: DestinationRequest) -> str:
    return (
        f"Recommend accommodation options in {r.destination} for {r.guests} {r.people}. "
        f"Group by budget categories (Budget, Mid-range, Luxury). For each category, provide "
        f"price ranges and at least 3 specific recommendations. Consider accommodation "
        f"that's suitable for {r.traveler_type}."
    )


def _food(r: DestinationRequest) -> str:
    return (
        f"Describe the local cuisine in {r.destination}. List 5-8 must-try dishes. Recommend "
        f"at least 4 restaurants across different price ranges. Include information about "
        f"vegetarian/vegan options or any dietary restrictions."
    )


def _transportation(r: DestinationRequest) -> str:
    return (
        f"Explain how to get to {r.destination} and transportation options within the area. "
        f"Include information about the nearest airport/train station, distances, local "
        f"transportation options like buses, taxis, rentals, and transportation tips."
    )


def _events(r: DestinationRequest) -> str:
    when = (
        f" occurring around {r.date_range.start} to {r.date_range.end}"
        if r.date_range else ""
    )
    return (
        f"List events, festivals, or activities in {r.destination}{when}. Include both "
        f"cultural events and recreational activities suitable for {r.traveler_type}. "
        f"Suggest guided tours or day trips."
    )


def _budget(r: DestinationRequest) -> str:
    days = f" for {r.duration} days" if r.duration else ""
    return (
        f"Provide a budget estimate for a trip to {r.destination} for {r.guests} "
        f"{r.people}{days}. Break down costs for transportation, accommodation, food, "
        f"activities, and other expenses across budget ranges. Provide a reasonable total "
        f"estimate."
    )


def _itinerary(r: DestinationRequest) -> str:
    days = f" for {r.duration} days" if r.duration else ""
    return (
        f"Create a suggested itinerary for a trip to {r.destination}{days}. For each day, "
        f"provide a structured plan including morning, afternoon, and evening activities, "
        f"with estimated times. Group attractions by proximity and consider a balanced mix "
        f"of sightseeing, relaxation, and cultural experiences."
    )


def _tips(r: DestinationRequest) -> str:
    dates = f"({r.date_range.start} to {r.date_range.end})" if r.date_range else ""
    return (
        f"Provide travel tips for visiting {r.destination}. Include information about the "
        f"best time to visit (and how the selected dates {dates} compare), local customs "
        f"and etiquette, language tips with useful phrases, and emergency contact "
        f"information."
    )


def _shopping(r: DestinationRequest) -> str:
    return (
        f"Recommend shopping experiences in {r.destination}. List major shopping areas, "
        f"markets, and malls. Suggest unique local products and souvenirs that travelers "
        f"should consider buying. Include information about price ranges and bargaining if "
        f"applicable."
    )


SECTION_TEMPLATES: Dict[Section, SectionTemplates] = {
    Section.OVERVIEW: SectionTemplates(
        instruction=_overview,
        shape={
            "description": "General information about the destination",
            "attractions": ["List of top attractions"],
            "cultural": "Cultural highlights and information",
            "weather": "Weather summary for the date range",
            "safety": "Safety tips or travel advisories",
        },
        fallback=fallbacks.overview,
    ),
    Section.ACCOMMODATION: SectionTemplates(
        instruction=_accommodation,
        shape={
            "options": [
                {
                    "type": "Type of accommodation (e.g., Luxury Hotels)",
                    "priceRange": "Price range in USD",
                    "description": "Description of this type of accommodation",
                    "recommendations": ["List of specific recommendations"],
                }
            ],
        },
        fallback=fallbacks.accommodation,
    ),
    Section.FOOD: SectionTemplates(
        instruction=_food,
        shape={
            "cuisine": "Overview of local cuisine",
            "dishes": ["Array of must-try dishes"],
            "restaurants": [
                {
                    "name": "Restaurant name",
                    "type": "Type of cuisine",
                    "description": "Brief description",
                }
            ],
            "dietary": "Information about vegetarian/vegan options",
        },
        fallback=fallbacks.food,
    ),
    Section.TRANSPORTATION: SectionTemplates(
        instruction=_transportation,
        shape={
            "gettingThere": "Information on how to reach the destination",
            "nearestAirport": "Name of nearest airport",
            "distance": "Distance from major cities",
            "localTransport": "Information about local transportation",
            "transportOptions": ["List of transport options"],
            "tips": "Transportation tips and advice",
        },
        fallback=fallbacks.transportation,
    ),
    Section.EVENTS: SectionTemplates(
        instruction=_events,
        shape={
            "events": [
                {"name": "Event name", "date": "Event date", "description": "Brief description"}
            ],
            "activities": [
                {"name": "Activity name", "type": "Type of activity", "description": "Brief description"}
            ],
            "tours": ["List of recommended tours"],
        },
        fallback=fallbacks.events,
    ),
    Section.BUDGET: SectionTemplates(
        instruction=_budget,
        shape={
            "summary": "General budget overview",
            "totalCost": "Total estimated cost in USD",
            "breakdown": [
                {"category": "Category name (e.g., Accommodation)", "cost": "Estimated cost in USD"}
            ],
            "disclaimer": "Budget disclaimer text",
        },
        fallback=fallbacks.budget,
    ),
    Section.ITINERARY: SectionTemplates(
        instruction=_itinerary,
        shape={
            "intro": "Introduction to the itinerary",
            "days": [
                {
                    "title": "Day title",
                    "activities": [
                        {"time": "Time of day", "title": "Activity title", "description": "Brief description"}
                    ],
                }
            ],
        },
        fallback=fallbacks.itinerary,
    ),
    Section.TIPS: SectionTemplates(
        instruction=_tips,
        shape={
            "bestTime": "Best time to visit information",
            "currentSeason": "Remarks about current season",
            "customs": "Local customs overview",
            "etiquetteTips": ["List of etiquette tips"],
            "language": {"overview": "Language information", "phrases": ["Useful phrases"]},
            "emergency": {"info": "Emergency information", "contacts": ["Emergency contact details"]},
        },
        fallback=fallbacks.tips,
    ),
    Section.SHOPPING: SectionTemplates(
        instruction=_shopping,
        shape={
            "overview": "Overview of shopping in the location",
            "shoppingAreas": [
                {"name": "Area name", "type": "Type of shopping area", "description": "Brief description"}
            ],
            "souvenirs": ["List of recommended souvenirs"],
        },
        fallback=fallbacks.shopping,
    ),
}

_missing = set(Section) - set(SECTION_TEMPLATES)
if _missing:
    raise RuntimeError(f"Sections without templates: {sorted(s.value for s in _missing)}")


def base_context(request: DestinationRequest) -> str:
    """Context sentence shared by every section's system prompt."""
    days = f"for {request.duration} days" if request.duration else ""
    planned = (
        f"The trip is planned from {request.date_range.start} to {request.date_range.end}."
        if request.date_range else ""
    )
    return (
        f"You are a travel expert assistant for TripSage. Provide detailed information "
        f"about {request.destination} for a trip with {request.guests} {request.people} "
        f"{days}. {planned}"
    )


class DestinationSectionTask(GenerationTask):
    """Generate one section of the destination details page."""

    def __init__(self, request: DestinationRequest):
        self.request = request
        self.templates = SECTION_TEMPLATES[request.section]

    @property
    def label(self) -> str:
        return f"destination:{self.request.section.value}"

    @property
    def shape(self) -> Dict[str, Any]:
        return self.templates.shape

    def build_prompt(self) -> PromptPair:
        shape = render_shape(self.shape)
        return PromptPair(
            system_prompt=base_context(self.request) + " Respond only with JSON in the specified format.",
            user_prompt=(
                self.templates.instruction(self.request)
                + " Format your response as a valid JSON object using this structure: "
                + shape
            ),
            expected_shape=shape,
        )

    def build_fallback(self) -> Dict[str, Any]:
        return self.templates.fallback(self.request)
