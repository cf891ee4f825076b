"""SQLAlchemy database models.
Defines the schema of the generation usage ledger and of stored trip summaries.
"""

import uuid

from sqlalchemy import Boolean, Column, String, DateTime, Integer, Float, Text, TypeDecorator, Index, JSON
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.dialects.postgresql import UUID as PostgreSQL_UUID
from sqlalchemy.sql import func

from tripsage.db.base import Base


class GUID(TypeDecorator):
    """Platform-independent GUID type.

    Uses PostgreSQL's UUID type when available,
    otherwise uses CHAR(36), storing as stringified hex values.
    """
    impl = String
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == 'postgresql':
            return dialect.type_descriptor(PostgreSQL_UUID(as_uuid=True))
        return dialect.type_descriptor(String(36))

    def process_bind_param(self, value, dialect):
        if value is None or dialect.name == 'postgresql':
            return value
        return str(value)

    def process_result_value(self, value, dialect):
        if value is None or isinstance(value, uuid.UUID):
            return value
        return uuid.UUID(value)


class GenerationCall(Base):
    """One outbound call to the generation endpoint.
    Columns:
        id (UUID): Primary key.
        task (String): Task label, e.g. 'destination:overview' or 'travel_packages'.
        model (String): Model name the call was made against.
        attempt (Integer): 1 for the first call of a request, 2 for the retry.
        outcome (String): 'parsed', 'extraction_failed' or 'upstream_error'.
        prompt_tokens (Integer): Prompt tokens reported by the upstream.
        completion_tokens (Integer): Candidate tokens reported by the upstream.
        cost_usd (Float): Estimated cost of the call.
        month_key (String): 'YYYY-MM' bucket used for spend cap checks.
        created_at (DateTime): Timestamp of the call.
    """
    __tablename__ = "generation_calls"

    id = Column(GUID(), primary_key=True, default=uuid.uuid4)
    task = Column(String(64), nullable=False, index=True)
    model = Column(String(100), nullable=False)
    attempt = Column(Integer, nullable=False, default=1)
    outcome = Column(String(32), nullable=False)
    prompt_tokens = Column(Integer, nullable=False, default=0)
    completion_tokens = Column(Integer, nullable=False, default=0)
    cost_usd = Column(Float, nullable=False, default=0.0)
    month_key = Column(String(7), nullable=False)
    created_at = Column(DateTime, nullable=False, default=func.now())

    __table_args__ = (
        Index("idx_generation_calls_month_outcome", "month_key", "outcome"),
    )


class JSONColumn(TypeDecorator):
    """JSON stored as JSONB on PostgreSQL, plain JSON elsewhere."""
    impl = JSON
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == 'postgresql':
            return dialect.type_descriptor(JSONB())
        return dialect.type_descriptor(JSON())


class TripSummary(Base):
    """A generated trip summary, retrievable through its share id.
    Columns:
        id (UUID): Primary key.
        share_id (String): Public identifier used in the share URL.
        destination (String): Destination the summary was generated for.
        start_date, end_date (String): Trip dates as supplied, if any.
        guests (Integer): Party size, if supplied.
        summary_text (Text): Overall summary paragraphs.
        place_info, budget_info, itinerary_info (JSON): Generated sections.
        is_fallback (Boolean): True when the content came from templates.
        created_at (DateTime): Creation timestamp.
    """
    __tablename__ = "trip_summaries"

    id = Column(GUID(), primary_key=True, default=uuid.uuid4)
    share_id = Column(String(36), nullable=False, unique=True, index=True)
    destination = Column(String(255), nullable=False)
    start_date = Column(String(32), nullable=True)
    end_date = Column(String(32), nullable=True)
    guests = Column(Integer, nullable=True)
    summary_text = Column(Text, nullable=True)
    place_info = Column(JSONColumn, nullable=True)
    budget_info = Column(JSONColumn, nullable=True)
    itinerary_info = Column(JSONColumn, nullable=True)
    is_fallback = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, nullable=False, default=func.now())
