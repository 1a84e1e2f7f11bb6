import logging
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status

from app.core.config import settings
from app.schemas.place import PlaceSuggestion
from app.services.autocomplete import build_suggestions
from app.services.places import FULL_DETAIL_FIELDS, SUMMARY_DETAIL_FIELDS, places_service

logger = logging.getLogger(__name__)

router = APIRouter()


async def _lookup_place(query: str | None, fields: list[str]) -> dict:
    place_id = await places_service.find_place_id(query or settings.DEFAULT_PLACE_QUERY)
    return await places_service.get_place_details(place_id, fields)


@router.get("/find-place")
async def find_place(
    query: Annotated[str | None, Query(description="Free-text place to look up")] = None
) -> dict:
    """
    Resolve a place by text and return the upstream details payload
    (name, formatted address, geometry and address components).
    """
    try:
        return await _lookup_place(query, SUMMARY_DETAIL_FIELDS)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Error fetching place information")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch place information",
        ) from e


@router.get("/autocomplete", response_model=list[PlaceSuggestion])
async def autocomplete(
    raw_input: Annotated[
        str | None, Query(alias="input", description="Partial city, state or country")
    ] = None,
) -> list[PlaceSuggestion]:
    user_input = (raw_input or "").strip()
    if not user_input:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Input parameter is required",
        )
    try:
        predictions = await places_service.autocomplete(user_input)
        return build_suggestions(user_input, predictions)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Error fetching autocomplete suggestions")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        ) from e


@router.get("/place-details")
async def place_details(
    query: Annotated[str | None, Query(description="Free-text place to look up")] = None
) -> dict:
    """Resolve a place by text and return its full details record."""
    try:
        details = await _lookup_place(query, FULL_DETAIL_FIELDS)
        return details.get("result") or {}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Error fetching place details")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        ) from e
