"""Pydantic models for request body validation.

Required fields are Optional here. Routes check them and answer with
their own 400 message.
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DestinationDetailsForm(BaseModel):
    """Body of a destination-details request."""
    model_config = ConfigDict(populate_by_name=True)

    destination: Optional[str] = Field(None, description="Destination name")
    section: Optional[str] = Field(None, description="Section key")
    start_date: Optional[str] = Field(None, alias="startDate", description="Trip start (ISO date)")
    end_date: Optional[str] = Field(None, alias="endDate", description="Trip end (ISO date)")
    guests: Optional[int] = Field(None, ge=1, description="Party size, defaults to 1")


class TravelPackageSearchForm(BaseModel):
    """Body of a travel package search."""
    model_config = ConfigDict(populate_by_name=True)

    destination: Optional[str] = None
    min_price: Optional[float] = Field(None, alias="minPrice", ge=0, allow_inf_nan=False)
    max_price: Optional[float] = Field(None, alias="maxPrice", ge=0, allow_inf_nan=False)
    duration: Optional[Union[int, str]] = Field(None, description="Days, e.g. '7', '3-7' or '15+'")

    @field_validator("duration")
    @classmethod
    def duration_as_text(cls, v):
        return None if v is None else str(v)


class TravelPackageDetailsForm(BaseModel):
    """Body of a travel package details lookup."""
    id: Optional[str] = None
    name: Optional[str] = None
    destination: Optional[str] = None


class HotelSearchForm(BaseModel):
    """Body of a hotel search."""
    model_config = ConfigDict(populate_by_name=True)

    location: Optional[str] = None
    min_price: Optional[float] = Field(None, alias="minPrice", ge=0, allow_inf_nan=False)
    max_price: Optional[float] = Field(None, alias="maxPrice", ge=0, allow_inf_nan=False)
    rating: Optional[float] = Field(None, ge=0, le=5, allow_inf_nan=False)


class HotelDetailsForm(BaseModel):
    """Body of a hotel details lookup."""
    id: Optional[str] = None
    name: Optional[str] = None
    location: Optional[str] = None


class TripSummaryForm(BaseModel):
    """Body of a trip summary request."""
    model_config = ConfigDict(populate_by_name=True)

    destination: Optional[str] = None
    start_date: Optional[str] = Field(None, alias="startDate")
    end_date: Optional[str] = Field(None, alias="endDate")
    guests: Optional[int] = Field(None, ge=1)
