"""Unit tests for the trip summary task and its repository."""

import pytest

from tripsage.generation.trip_summary import TripSummaryRequest, TripSummaryTask
from tripsage.generation.types import DateRange
from tripsage.repositories.trip_summaries import TripSummaryRepository


def test_prompt_mentions_dates_and_travelers():
    request = TripSummaryRequest(
        destination="Porto",
        date_range=DateRange("2025-09-01", "2025-09-05"),
        guests=3,
    )
    prompt = TripSummaryTask(request).build_prompt()

    assert "Generate a comprehensive travel summary for a trip to Porto." in prompt.user_prompt
    assert "The trip dates are from 2025-09-01 to 2025-09-05." in prompt.user_prompt
    assert "There are 3 travelers." in prompt.user_prompt
    assert '"summary_text"' in prompt.expected_shape
    assert prompt.system_prompt.endswith("Respond only with JSON in the specified format.")


def test_prompt_without_optional_details():
    prompt = TripSummaryTask(TripSummaryRequest(destination="Porto")).build_prompt()

    assert "trip dates" not in prompt.user_prompt
    assert "travelers." not in prompt.user_prompt


def test_required_keys():
    task = TripSummaryTask(TripSummaryRequest(destination="Porto"))
    assert task.required_keys == ("summary_text", "place_info", "budget_info", "itinerary_info")


def test_fallback_defaults_to_three_days():
    task = TripSummaryTask(TripSummaryRequest(destination="Porto"))
    fallback = task.build_fallback()

    assert set(task.required_keys) <= set(fallback)
    assert fallback["itinerary_info"]["recommended_days"] == 3
    assert [d["day"] for d in fallback["itinerary_info"]["days"]] == [1, 2, 3]
    assert fallback == task.build_fallback()


def test_fallback_itinerary_is_capped():
    request = TripSummaryRequest(destination="Porto", date_range=DateRange("2025-09-01", "2025-09-30"))
    fallback = TripSummaryTask(request).build_fallback()

    assert fallback["itinerary_info"]["recommended_days"] == 7
    assert len(fallback["itinerary_info"]["days"]) == 7


def test_guests_must_be_positive():
    with pytest.raises(ValueError):
        TripSummaryRequest(destination="Porto", guests=0)


def test_repository_lookup_by_id_and_share_id(db_session):
    repo = TripSummaryRepository(db_session)
    summary = TripSummaryTask(TripSummaryRequest(destination="Porto")).build_fallback()

    record = repo.create_summary("Porto", summary, is_fallback=True, guests=2)

    assert repo.get_summary(str(record.id)).share_id == record.share_id
    assert repo.get_summary(record.share_id).id == record.id
    assert record.itinerary_info["recommended_days"] == 3
    assert repo.get_summary("not-a-uuid") is None
