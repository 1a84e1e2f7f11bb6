import logging
from typing import Any

from fastapi import HTTPException, status
from httpx import AsyncClient, HTTPError

from app.core.config import settings
from app.schemas.place import RawPrediction

SUMMARY_DETAIL_FIELDS = [
    "name",
    "formatted_address",
    "geometry",
    "address_components",
]

FULL_DETAIL_FIELDS = SUMMARY_DETAIL_FIELDS + [
    "international_phone_number",
    "opening_hours",
    "website",
    "reviews",
    "types",
]


class PlacesService:
    _instance: "PlacesService" = None

    def __init__(self):
        if PlacesService._instance is not None:
            raise Exception("This class is a singleton!")
        self.base_url = settings.PLACES_API_URL.rstrip("/")
        self.autocomplete_url = f"{self.base_url}/autocomplete/json"
        self.find_place_url = f"{self.base_url}/findplacefromtext/json"
        self.details_url = f"{self.base_url}/details/json"
        self.logger = logging.getLogger(__name__)

    @classmethod
    def get_instance(cls) -> "PlacesService":
        if PlacesService._instance is None:
            PlacesService._instance = cls()
        return PlacesService._instance

    async def _get_json(self, url: str, params: dict[str, Any], operation: str) -> dict:
        """
        GET a Places endpoint with the API key attached.
        Transport errors, non-2xx responses and unparsable bodies surface as 502.
        """
        params = {"key": settings.GOOGLE_MAPS_KEY, **params}
        try:
            async with AsyncClient(timeout=settings.PLACES_TIMEOUT_SECONDS) as client:
                r = await client.get(url, params=params)
            r.raise_for_status()
            return r.json()
        except HTTPError as e:
            # str(e) on an HTTPStatusError embeds the request URL, which carries the key
            self.logger.error("Places %s request failed: %s", operation, type(e).__name__)
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=f"Places {operation} request failed",
            ) from e
        except ValueError as e:
            self.logger.error("Places %s returned invalid JSON: %s", operation, e)
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=f"Invalid response from Places {operation}",
            ) from e

    async def autocomplete(self, user_input: str) -> list[RawPrediction]:
        params = {
            "input": user_input,
            "types": settings.AUTOCOMPLETE_TYPES,
            "language": settings.AUTOCOMPLETE_LANGUAGE,
        }
        data = await self._get_json(self.autocomplete_url, params, "autocomplete")
        if data.get("status") != "OK":
            self.logger.warning(
                "Autocomplete failed for input '%s' with status '%s' and message '%s'",
                user_input,
                data.get("status"),
                data.get("error_message"),
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail={
                    "error": "Failed to fetch autocomplete suggestions",
                    "details": data,
                },
            )
        return [RawPrediction.from_google(p) for p in data.get("predictions") or []]

    async def find_place_id(self, query: str) -> str:
        params = {"input": query, "inputtype": "textquery", "fields": "place_id"}
        data = await self._get_json(self.find_place_url, params, "find place")
        candidates = data.get("candidates")
        if data.get("status") != "OK" or not candidates:
            self.logger.info(
                "No place found for query '%s' (status '%s')", query, data.get("status")
            )
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Place not found")
        return candidates[0]["place_id"]

    async def get_place_details(self, place_id: str, fields: list[str]) -> dict:
        params = {"place_id": place_id, "fields": ",".join(fields)}
        data = await self._get_json(self.details_url, params, "place details")
        if data.get("status") != "OK":
            self.logger.warning(
                "Place details failed for '%s' with status '%s' and message '%s'",
                place_id,
                data.get("status"),
                data.get("error_message"),
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to fetch place details",
            )
        return data


places_service = PlacesService.get_instance()
