"""Unit tests for destination sections: prompts, durations and fallbacks."""

import json

import pytest

from tripsage.generation.errors import UnknownSectionError
from tripsage.generation.sections import (
    SECTION_TEMPLATES,
    DestinationRequest,
    DestinationSectionTask,
    Section,
)
from tripsage.generation.tasks import reinforce
from tripsage.generation.types import DateRange


def _request(section: Section, **kwargs) -> DestinationRequest:
    return DestinationRequest(destination="Lisbon", section=section, **kwargs)


def test_every_section_has_templates():
    assert set(SECTION_TEMPLATES) == set(Section)


def test_unknown_section_raises():
    with pytest.raises(UnknownSectionError) as exc_info:
        Section.parse("nightlife")
    assert exc_info.value.section == "nightlife"


def test_known_section_parses():
    assert Section.parse("budget") is Section.BUDGET


def test_duration_rounds_up_partial_days():
    dates = DateRange("2025-06-01", "2025-06-05T12:00:00")
    assert dates.duration_days == 5


def test_duration_is_absolute():
    assert DateRange("2025-06-10", "2025-06-03").duration_days == 7


def test_invalid_date_rejected():
    with pytest.raises(ValueError):
        DateRange("next tuesday", "2025-06-03")


def test_guests_must_be_positive():
    with pytest.raises(ValueError):
        _request(Section.FOOD, guests=0)


def test_system_prompt_context_single_guest():
    task = DestinationSectionTask(_request(Section.OVERVIEW))
    prompt = task.build_prompt()

    assert "about Lisbon for a trip with 1 person" in prompt.system_prompt
    assert prompt.system_prompt.endswith("Respond only with JSON in the specified format.")
    assert "typical weather" in prompt.user_prompt


def test_system_prompt_context_with_dates_and_group():
    request = _request(
        Section.OVERVIEW,
        date_range=DateRange("2025-06-01", "2025-06-08"),
        guests=4,
    )
    prompt = DestinationSectionTask(request).build_prompt()

    assert "4 people" in prompt.system_prompt
    assert "for 7 days" in prompt.system_prompt
    assert "The trip is planned from 2025-06-01 to 2025-06-08." in prompt.system_prompt
    assert "the dates 2025-06-01 to 2025-06-08" in prompt.user_prompt


def test_user_prompt_embeds_expected_shape():
    prompt = DestinationSectionTask(_request(Section.FOOD)).build_prompt()

    assert "Format your response as a valid JSON object using this structure: " in prompt.user_prompt
    assert prompt.user_prompt.endswith(prompt.expected_shape)
    assert set(json.loads(prompt.expected_shape)) == {"cuisine", "dishes", "restaurants", "dietary"}


def test_reinforced_prompt_appends_directives():
    prompt = DestinationSectionTask(_request(Section.TIPS)).build_prompt()
    retry = reinforce(prompt)

    assert retry.system_prompt.startswith(prompt.system_prompt)
    assert "ONLY valid JSON" in retry.system_prompt
    assert retry.user_prompt.startswith(prompt.user_prompt)
    assert "CRITICAL" in retry.user_prompt
    assert retry.user_prompt.endswith(prompt.expected_shape)


@pytest.mark.parametrize("section", list(Section))
def test_fallback_covers_shape_and_is_pure(section):
    request = _request(section, date_range=DateRange("2025-06-01", "2025-06-04"), guests=2)
    task = DestinationSectionTask(request)

    first = task.build_fallback()
    second = task.build_fallback()

    assert first == second
    assert set(task.required_keys) <= set(first)
    assert "is_fallback_data" not in first


def test_budget_fallback_mentions_party_and_days():
    request = _request(Section.BUDGET, date_range=DateRange("2025-06-01", "2025-06-04"), guests=3)
    summary = DestinationSectionTask(request).build_fallback()["summary"]

    assert "for 3 people over 3 days" in summary


def test_overview_fallback_weather_uses_dates():
    request = _request(Section.OVERVIEW, date_range=DateRange("2025-06-01", "2025-06-04"))
    weather = DestinationSectionTask(request).build_fallback()["weather"]

    assert "between 2025-06-01 and 2025-06-04" in weather


def test_task_label():
    assert DestinationSectionTask(_request(Section.SHOPPING)).label == "destination:shopping"
