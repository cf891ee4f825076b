"""Trip summary repository for database operations."""

import uuid
from typing import Any, Dict, Optional
from sqlalchemy.orm import Session as DBSession

from tripsage.db.models import TripSummary


class TripSummaryRepository:
    """Repository for stored trip summaries."""

    def __init__(self, db: DBSession):
        self.db = db

    def create_summary(self,
                        destination: str,
                        summary: Dict[str, Any],
                        is_fallback: bool,
                        start_date: Optional[str] = None,
                        end_date: Optional[str] = None,
                        guests: Optional[int] = None,
                    ) -> TripSummary:
        """Store a generated summary under a fresh share id.
        Args:
            destination (str): Destination name.
            summary (Dict[str, Any]): Generated or fallback summary payload.
            is_fallback (bool): Whether the payload came from templates.
            start_date (Optional[str]): Trip start as supplied.
            end_date (Optional[str]): Trip end as supplied.
            guests (Optional[int]): Party size.
        Returns:
            TripSummary: Created record.
        """
        record = TripSummary(
            share_id=str(uuid.uuid4()),
            destination=destination,
            start_date=start_date,
            end_date=end_date,
            guests=guests,
            summary_text=summary.get("summary_text"),
            place_info=summary.get("place_info"),
            budget_info=summary.get("budget_info"),
            itinerary_info=summary.get("itinerary_info"),
            is_fallback=is_fallback,
        )
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)
        return record

    def get_summary(self, identifier: str) -> Optional[TripSummary]:
        """Find a summary by primary key, then by share id."""
        try:
            record_id = uuid.UUID(identifier)
        except ValueError:
            record_id = None

        if record_id is not None:
            record = self.db.query(TripSummary).filter(TripSummary.id == record_id).first()
            if record is not None:
                return record

        return self.db.query(TripSummary).filter(TripSummary.share_id == identifier).first()
