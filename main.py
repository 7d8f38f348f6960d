import asyncio
import logging
from contextlib import asynccontextmanager
from datetime import date, datetime, timezone
from typing import List, Optional
from uuid import UUID

from fastapi import FastAPI, HTTPException, Depends, Query, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from api.schemas import (
    CreateBookingRequest, UpdateBookingRequest,
    BookingResponse
)
from api.dependencies import booking_service, get_booking_service
from application.services import BookingService
from config import settings
from domain.entities import Booking
from domain.exceptions import BookingNotFoundError

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # asyncio.Lock binds to the loop that first waits on it
    booking_service.lock = asyncio.Lock()
    logger.info("%s %s started", settings.service_name, settings.service_version)
    yield


app = FastAPI(
    title="Booking API",
    description="API for booking stays at a single-unit property",
    version=settings.service_version,
    lifespan=lifespan
)


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Report malformed input as 400 naming the first offending field"""
    errors = exc.errors()
    field = errors[0]["loc"][-1] if errors and errors[0].get("loc") else "body"
    logger.debug("Rejected request to %s: %s", request.url.path, errors)
    return JSONResponse(
        status_code=400,
        content={"detail": f"Invalid value for '{field}' value."}
    )

# ============================================================================
# HEALTH ENDPOINT
# ============================================================================

@app.get("/api/health", tags=["Health"])
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": settings.service_name,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }

# ============================================================================
# BOOKING ENDPOINTS
# ============================================================================

@app.get("/booking/availability", response_model=List[date], tags=["Availability"])
async def get_availability(
    from_date: date = Query(..., alias="fromDate", description="First day to check (inclusive)"),
    to_date: Optional[date] = Query(None, alias="toDate", description="Last day bound (exclusive), defaults to a month after fromDate"),
    service: BookingService = Depends(get_booking_service)
):
    """List the free days in a date window"""
    try:
        return await service.find_availability(from_date, to_date)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/booking", response_model=UUID, status_code=201, tags=["Bookings"])
async def create_booking(
    request: CreateBookingRequest,
    service: BookingService = Depends(get_booking_service)
):
    """Create new booking"""
    try:
        booking_id = await service.create_booking(
            checkin_date=request.checkin_date,
            checkout_date=request.checkout_date,
            email=request.email,
            full_name=request.full_name
        )
        return booking_id
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.get("/booking/{booking_id}", response_model=BookingResponse, tags=["Bookings"])
async def get_booking(
    booking_id: str,
    service: BookingService = Depends(get_booking_service)
):
    """Get booking by ID"""
    try:
        booking = await service.get_booking(_parse_booking_id(booking_id))
    except BookingNotFoundError:
        return Response(status_code=404)
    return _booking_to_response(booking)


@app.delete("/booking/{booking_id}", status_code=204, tags=["Bookings"])
async def cancel_booking(
    booking_id: str,
    service: BookingService = Depends(get_booking_service)
):
    """Cancel booking"""
    try:
        await service.cancel_booking(_parse_booking_id(booking_id))
    except BookingNotFoundError:
        return Response(status_code=404)
    return Response(status_code=204)


@app.patch("/booking/{booking_id}", response_model=BookingResponse, tags=["Bookings"])
async def modify_booking(
    booking_id: str,
    request: UpdateBookingRequest,
    service: BookingService = Depends(get_booking_service)
):
    """Modify booking details - only the fields sent are changed"""
    uuid = _parse_booking_id(booking_id)
    try:
        booking = await service.update_booking(
            booking_id=uuid,
            checkin_date=request.checkin_date,
            checkout_date=request.checkout_date,
            email=request.email,
            full_name=request.full_name
        )
    except BookingNotFoundError:
        return Response(status_code=404)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _booking_to_response(booking)

# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def _parse_booking_id(booking_id: str) -> UUID:
    try:
        return UUID(booking_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid ID provided.")


def _booking_to_response(booking: Booking) -> BookingResponse:
    """Convert Booking entity to BookingResponse"""
    return BookingResponse(
        booking_id=booking.booking_id,
        checkin_date=booking.checkin_date,
        checkout_date=booking.checkout_date,
        email=booking.email,
        full_name=booking.full_name
    )

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
