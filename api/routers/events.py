from fastapi import APIRouter, Depends, HTTPException, Path
from typing import List
from pydantic import BaseModel
import logging
from ufc_scraper.event_service import EventService
from ufc_scraper.models import Event
from ..dependencies import get_event_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/events", tags=["events"])

# Response Models
class RefreshResponse(BaseModel):
    message: str
    count: int
    fallback: bool = False

class ErrorResponse(BaseModel):
    error: str
    detail: str

# Utility Functions
def handle_service_error(e: Exception, operation: str = "event operation"):
    """Standardized error handling"""
    error_msg = f"Failed to execute {operation}"
    logger.error(f"{error_msg}: {str(e)}")
    raise HTTPException(
        status_code=500,
        detail={"error": "Internal Server Error", "message": f"{error_msg}: {str(e)}"}
    )

# Endpoints
@router.get("/", response_model=List[Event])
async def get_events(service: EventService = Depends(get_event_service)):
    """All upcoming events, served from cache"""
    try:
        return await service.get_all()
    except Exception as e:
        handle_service_error(e, "fetching events")

@router.post("/refresh", response_model=RefreshResponse)
async def refresh_events(service: EventService = Depends(get_event_service)):
    """Scrape now and overwrite the cache"""
    try:
        report = await service.refresh()
    except Exception as e:
        handle_service_error(e, "refreshing events")

    return RefreshResponse(
        message="Events refreshed successfully",
        count=len(report.events),
        fallback=report.fallback
    )

@router.get("/{event_id}", response_model=Event, responses={404: {"model": ErrorResponse}})
async def get_event(
    event_id: str = Path(..., description="Event id, e.g. ufc-310"),
    service: EventService = Depends(get_event_service)
):
    """Single event by id"""
    try:
        event = await service.get_by_id(event_id)
    except Exception as e:
        handle_service_error(e, f"fetching event '{event_id}'")

    if event is None:
        raise HTTPException(status_code=404, detail=f"Event '{event_id}' not found")
    return event
