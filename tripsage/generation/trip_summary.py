"""Shareable trip summary: overall text plus place, budget and itinerary blocks."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from tripsage.generation.tasks import GenerationTask, render_shape
from tripsage.generation.types import DateRange, PromptPair

SUMMARY_SYSTEM_PROMPT = (
    "You are a travel expert assistant for TripSage. Respond only with JSON in the specified format."
)

# Template itineraries stay short whatever the trip length
MAX_FALLBACK_DAYS = 7
DEFAULT_FALLBACK_DAYS = 3


@dataclass(frozen=True)
class TripSummaryRequest:
    destination: str
    date_range: Optional[DateRange] = None
    guests: Optional[int] = None

    def __post_init__(self):
        if self.guests is not None and self.guests < 1:
            raise ValueError("guests must be at least 1")


class TripSummaryTask(GenerationTask):
    """Generate the summary shown on a shared trip page."""

    label = "trip_summary"

    def __init__(self, request: TripSummaryRequest):
        self.request = request

    @property
    def shape(self) -> Dict[str, Any]:
        return {
            "summary_text": "A brief overall summary of the trip in 2-3 paragraphs",
            "place_info": {
                "description": "General description",
                "highlights": ["Highlight 1", "Highlight 2"],
                "best_time_to_visit": "Season information",
                "language": "Main language(s)",
                "currency": "Local currency",
            },
            "budget_info": {
                "accommodation": "Price range and information",
                "food": "Daily food budget estimate",
                "transportation": "Local transport costs",
                "activities": "Cost information for main activities",
                "total_estimate": "Total approximate budget",
            },
            "itinerary_info": {
                "recommended_days": 3,
                "days": [
                    {
                        "day": 1,
                        "title": "Day title",
                        "description": "Day description",
                        "activities": ["Activity 1", "Activity 2"],
                    }
                ],
            },
        }

    def build_prompt(self) -> PromptPair:
        r = self.request
        d = r.destination
        lines = [f"Generate a comprehensive travel summary for a trip to {d}."]
        if r.date_range:
            lines.append(f"The trip dates are from {r.date_range.start} to {r.date_range.end}.")
        if r.guests:
            lines.append(f"There are {r.guests} travelers.")

        shape = render_shape(self.shape)
        user_prompt = (
            "\n".join(lines)
            + "\n\nThe summary should include three main sections:\n\n"
            + f"1. Place Information - Include key facts about {d}, notable attractions, "
            + "best times to visit, and cultural highlights.\n\n"
            + f"2. Budget Information - Provide approximate costs for accommodation, food, "
            + f"transportation, and activities in {d}.\n\n"
            + f"3. Itinerary Information - Suggest a day-by-day itinerary for exploring {d}.\n\n"
            + f"Return the data as a JSON object with the following structure:\n{shape}\n\n"
            + "Return ONLY valid JSON without any explanations, prefixes, or markdown formatting."
        )
        return PromptPair(SUMMARY_SYSTEM_PROMPT, user_prompt, shape)

    def build_fallback(self) -> Dict[str, Any]:
        r = self.request
        d = r.destination
        trip_days = r.date_range.duration_days if r.date_range else 0
        days = min(trip_days or DEFAULT_FALLBACK_DAYS, MAX_FALLBACK_DAYS)
        party = f" for {r.guests} travelers" if r.guests else ""

        return {
            "summary_text": (
                f"A trip to {d}{party} offers a mix of sightseeing, local food and time to "
                f"explore at your own pace. Start with the best-known landmarks, then spend "
                f"a day or two in the neighbourhoods where locals eat and shop."
            ),
            "place_info": {
                "description": f"{d} is a popular destination known for its culture, history and scenery.",
                "highlights": [
                    "Historic city centre",
                    "Local markets",
                    "Museums and galleries",
                    "Viewpoints and parks",
                ],
                "best_time_to_visit": "Spring and autumn, when the weather is mild and crowds are smaller.",
                "language": "Local language",
                "currency": "Local currency",
            },
            "budget_info": {
                "accommodation": "$80-250 per night depending on comfort level",
                "food": "$30-80 per person per day",
                "transportation": "$10-25 per day on public transport",
                "activities": "$20-60 per day for entrance fees and tours",
                "total_estimate": f"About $150-400 per person per day over {days} days",
            },
            "itinerary_info": {
                "recommended_days": days,
                "days": [
                    {
                        "day": n,
                        "title": "Arrival and first impressions" if n == 1 else f"Exploring {d}, day {n}",
                        "description": f"Spend the day discovering a different side of {d}.",
                        "activities": ["Guided walk", "Local lunch", "Evening stroll"],
                    }
                    for n in range(1, days + 1)
                ],
            },
        }
