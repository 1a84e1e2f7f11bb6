from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ExactMatch(str, Enum):
    CITY = "city"
    STATE = "state"
    COUNTRY = "country"


# Sort weight of each exact match kind; unmatched suggestions weigh 0
EXACT_MATCH_PRIORITY: dict[ExactMatch, int] = {
    ExactMatch.CITY: 3,
    ExactMatch.STATE: 2,
    ExactMatch.COUNTRY: 1,
}


class RawPrediction(BaseModel):
    """Ordered comma-segments of one autocomplete prediction, e.g. ["Sydney", "NSW", "Australia"]"""

    terms: list[str] = []

    @classmethod
    def from_google(cls, prediction: dict) -> "RawPrediction":
        terms = prediction.get("terms") or []
        return cls(terms=[term.get("value", "") for term in terms])


class PlaceSuggestion(BaseModel):
    """Structured suggestion derived from a RawPrediction.

    city, state and country are taken by position from the end of the term
    list and are not validated against any gazetteer.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    exact_match: ExactMatch | None = Field(default=None, alias="exactMatch")

    @property
    def priority(self) -> int:
        if self.exact_match is None:
            return 0
        return EXACT_MATCH_PRIORITY[self.exact_match]
