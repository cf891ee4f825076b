"""FastAPI routes for the generation endpoints."""

import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from tripsage.config import Settings, get_settings
from tripsage.deps import get_admin_user, get_db, get_orchestrator
from tripsage.generation.catalogue import (
    HotelDetailsLookup,
    HotelDetailsTask,
    HotelSearch,
    HotelSearchTask,
    TravelPackageSearch,
    TravelPackageSearchTask,
)
from tripsage.generation.errors import UnknownSectionError
from tripsage.generation.orchestrator import GenerationOrchestrator
from tripsage.generation.sections import DestinationRequest, DestinationSectionTask, Section
from tripsage.generation.spend_cap import SpendCapManager
from tripsage.generation.tasks import GenerationTask
from tripsage.generation.trip_summary import TripSummaryRequest, TripSummaryTask
from tripsage.generation.types import DateRange, parse_iso_datetime
from tripsage.repositories.ledger import LedgerRepository
from tripsage.repositories.trip_summaries import TripSummaryRepository
from tripsage.web.forms import (
    DestinationDetailsForm,
    HotelDetailsForm,
    HotelSearchForm,
    TravelPackageDetailsForm,
    TravelPackageSearchForm,
    TripSummaryForm,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


async def _generate(orchestrator: GenerationOrchestrator, task: GenerationTask) -> JSONResponse:
    result = await orchestrator.run(task)
    logger.info(
        f"Served {task.label} (fallback={result.is_fallback}, calls={result.attempts})"
    )
    return JSONResponse(content=result.payload)


def _date_range(form) -> Optional[DateRange]:
    """Validate the supplied dates. A range is built only when both ends are given."""
    for field, value in (("start", form.start_date), ("end", form.end_date)):
        if value:
            try:
                parse_iso_datetime(value)
            except ValueError:
                raise HTTPException(status_code=400, detail=f"Invalid {field} date format")

    if form.start_date and form.end_date:
        return DateRange(form.start_date, form.end_date)
    return None


@router.post("/api/destination-details")
async def destination_details(
    form: DestinationDetailsForm,
    orchestrator: GenerationOrchestrator = Depends(get_orchestrator),
):
    """Generate one section of a destination page."""
    if _blank(form.destination) or _blank(form.section):
        raise HTTPException(status_code=400, detail="Missing required parameters")

    try:
        section = Section.parse(form.section.strip())
    except UnknownSectionError as e:
        raise HTTPException(
            status_code=400,
            detail={
                "error": "Unknown section",
                "section": e.section,
                "validSections": [s.value for s in Section],
            },
        )

    request = DestinationRequest(
        destination=form.destination.strip(),
        section=section,
        date_range=_date_range(form),
        guests=form.guests or 1,
    )

    try:
        return await _generate(orchestrator, DestinationSectionTask(request))
    except Exception as e:
        logger.exception(f"Error generating {section.value} for {request.destination}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/api/llm/travel-packages/search")
async def search_travel_packages(
    form: TravelPackageSearchForm,
    orchestrator: GenerationOrchestrator = Depends(get_orchestrator),
):
    """Generate travel packages for a destination."""
    if _blank(form.destination):
        raise HTTPException(status_code=400, detail="Destination is required")

    search = TravelPackageSearch(
        destination=form.destination.strip(),
        min_price=form.min_price,
        max_price=form.max_price,
        duration=form.duration,
    )

    try:
        return await _generate(orchestrator, TravelPackageSearchTask(search))
    except Exception as e:
        logger.exception(f"Error generating travel packages for {search.destination}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/api/llm/travel-packages/details")
async def travel_package_details(form: TravelPackageDetailsForm):
    """Package details live with the caller's search results; nothing is generated here."""
    if _blank(form.id):
        raise HTTPException(status_code=400, detail="Travel package ID is required")

    return JSONResponse(content={"is_fallback_data": True, "travelPackage": None})


@router.post("/api/llm/hotels/search")
async def search_hotels(
    form: HotelSearchForm,
    orchestrator: GenerationOrchestrator = Depends(get_orchestrator),
):
    """Generate hotels for a location."""
    if _blank(form.location):
        raise HTTPException(status_code=400, detail="Location is required")

    search = HotelSearch(
        location=form.location.strip(),
        min_price=form.min_price,
        max_price=form.max_price,
        rating=form.rating,
    )

    try:
        return await _generate(orchestrator, HotelSearchTask(search))
    except Exception as e:
        logger.exception(f"Error generating hotels for {search.location}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/api/llm/hotels/details")
async def hotel_details(
    form: HotelDetailsForm,
    orchestrator: GenerationOrchestrator = Depends(get_orchestrator),
):
    """Generate the detail record for one hotel."""
    if _blank(form.id) or _blank(form.name) or _blank(form.location):
        raise HTTPException(status_code=400, detail="Hotel ID, name, and location are required")

    lookup = HotelDetailsLookup(
        hotel_id=form.id.strip(),
        name=form.name.strip(),
        location=form.location.strip(),
    )

    try:
        return await _generate(orchestrator, HotelDetailsTask(lookup))
    except Exception as e:
        logger.exception(f"Error generating details for hotel {lookup.hotel_id}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


def _summary_record(record) -> dict:
    return {
        "id": str(record.id),
        "share_id": record.share_id,
        "share_url": f"/shared-trip/{record.share_id}",
        "destination": record.destination,
        "start_date": record.start_date,
        "end_date": record.end_date,
        "guests": record.guests,
        "summary_text": record.summary_text,
        "place_info": record.place_info,
        "budget_info": record.budget_info,
        "itinerary_info": record.itinerary_info,
        "is_fallback_data": record.is_fallback,
        "created_at": record.created_at.isoformat(),
    }


@router.post("/api/trip-summary")
async def create_trip_summary(
    form: TripSummaryForm,
    db: Session = Depends(get_db),
    orchestrator: GenerationOrchestrator = Depends(get_orchestrator),
):
    """Generate a trip summary and store it under a share id."""
    if _blank(form.destination):
        raise HTTPException(status_code=400, detail="Destination is required")

    request = TripSummaryRequest(
        destination=form.destination.strip(),
        date_range=_date_range(form),
        guests=form.guests,
    )

    try:
        result = await orchestrator.run(TripSummaryTask(request))
        record = TripSummaryRepository(db).create_summary(
            destination=request.destination,
            summary=result.payload,
            is_fallback=result.is_fallback,
            start_date=form.start_date,
            end_date=form.end_date,
            guests=form.guests,
        )
    except Exception as e:
        logger.exception(f"Error creating trip summary for {request.destination}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")

    logger.info(f"Stored trip summary {record.share_id} (fallback={result.is_fallback})")
    return JSONResponse(content={
        "success": True,
        "summary": result.payload,
        "shareUrl": f"/shared-trip/{record.share_id}",
        "shareId": record.share_id,
        "id": str(record.id),
        "is_fallback_data": result.is_fallback,
    })


@router.get("/api/trip-summary/{summary_id}")
async def get_trip_summary(summary_id: str, db: Session = Depends(get_db)):
    """Fetch a stored trip summary by id or share id."""
    try:
        record = TripSummaryRepository(db).get_summary(summary_id)
    except Exception as e:
        logger.exception(f"Error fetching trip summary {summary_id}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")

    if record is None:
        raise HTTPException(status_code=404, detail="Trip summary not found")

    return {"success": True, "summary": _summary_record(record)}


@router.get("/admin/generation-stats")
async def generation_stats(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    admin_user: str = Depends(get_admin_user),
):
    """Monthly generation usage from the ledger."""
    try:
        ledger_repo = LedgerRepository(db)
        spend_cap = SpendCapManager(settings, db)
        return {
            "stats": ledger_repo.get_monthly_stats(),
            "spend_status": spend_cap.get_spend_status(),
            "recent_calls": [
                {
                    "task": call.task,
                    "model": call.model,
                    "attempt": call.attempt,
                    "outcome": call.outcome,
                    "cost_usd": call.cost_usd,
                    "created_at": call.created_at.isoformat(),
                }
                for call in ledger_repo.get_recent_calls(limit=20)
            ],
        }
    except Exception as e:
        logger.error(f"Error loading generation stats: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "timestamp": datetime.utcnow().isoformat()}
