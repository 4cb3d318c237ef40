import logging
from typing import Union

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.api.dependencies import get_flight_resolver
from app.models.flight import FlightQuery
from app.models.responses import (
    ComposedFlightResponse,
    ErrorResponse,
    FlightNotFoundResponse,
    RouteSearchResponse,
)
from app.services.flight_resolver import FlightResolver

router = APIRouter(prefix="/api", tags=["flight-tracker"])

logger = logging.getLogger("aerodex.flight_tracker")

GENERIC_FAILURE = "Failed to retrieve flight information. Please check the flight number."


@router.post(
    "/flight-tracker",
    summary="Track a flight by number, or list airborne flights for a route",
    responses={
        200: {"model": Union[ComposedFlightResponse, RouteSearchResponse]},
        400: {"model": ErrorResponse},
        404: {"model": FlightNotFoundResponse},
        500: {"model": ErrorResponse},
    },
)
async def track_flight(
    query: FlightQuery, resolver: FlightResolver = Depends(get_flight_resolver)
) -> JSONResponse:
    """Resolve a flight identifier or route query into one of the response shapes."""

    input_error = query.input_error()
    if input_error:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(error=input_error).to_json_dict(),
        )

    try:
        result = await resolver.resolve(query)
    except Exception:
        logger.exception(
            "Flight tracking failed: flight=%s route=%s->%s",
            query.flight_number,
            query.departure,
            query.arrival,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error=GENERIC_FAILURE).to_json_dict(),
        )

    status_code = status.HTTP_200_OK
    if isinstance(result, FlightNotFoundResponse):
        status_code = status.HTTP_404_NOT_FOUND

    logger.info(
        "Flight tracker resolved: mode=%s query=%s outcome=%s",
        query.mode,
        query.flight_number or f"{query.departure}->{query.arrival}",
        type(result).__name__,
    )
    return JSONResponse(status_code=status_code, content=result.to_json_dict())
