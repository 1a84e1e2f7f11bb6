from collections.abc import Iterable

from app.schemas.place import ExactMatch, PlaceSuggestion, RawPrediction


def _term_from_end(terms: list[str], position: int) -> str:
    """Return the position-th term counted from the end, or "" if the list is too short."""
    if len(terms) < position:
        return ""
    return terms[-position]


def parse_prediction(prediction: RawPrediction) -> PlaceSuggestion:
    terms = prediction.terms
    return PlaceSuggestion(
        name=terms[0] if terms else "",
        address=", ".join(terms[1:]),
        city=_term_from_end(terms, 3),
        state=_term_from_end(terms, 2),
        country=_term_from_end(terms, 1),
    )


def matches_input(suggestion: PlaceSuggestion, needle: str) -> bool:
    # needle is expected lowercased already
    return (
        needle in suggestion.city.lower()
        or needle in suggestion.state.lower()
        or needle in suggestion.country.lower()
    )


def annotate_exact_match(suggestion: PlaceSuggestion, needle: str) -> PlaceSuggestion:
    """Flag the first field equal to the needle, checking country, then state, then city.

    The check order differs from the ranking order in rank_suggestions, so a
    suggestion whose country and city both equal the needle is flagged as a
    country match.
    """
    if suggestion.country.lower() == needle:
        exact_match = ExactMatch.COUNTRY
    elif suggestion.state.lower() == needle:
        exact_match = ExactMatch.STATE
    elif suggestion.city.lower() == needle:
        exact_match = ExactMatch.CITY
    else:
        return suggestion
    return suggestion.model_copy(update={"exact_match": exact_match})


def rank_suggestions(suggestions: Iterable[PlaceSuggestion]) -> list[PlaceSuggestion]:
    # sorted() is stable, so equal priorities keep their upstream order
    return sorted(suggestions, key=lambda suggestion: suggestion.priority, reverse=True)


def dedupe_suggestions(suggestions: Iterable[PlaceSuggestion]) -> list[PlaceSuggestion]:
    seen: set[tuple[str, str]] = set()
    unique: list[PlaceSuggestion] = []
    for suggestion in suggestions:
        key = (suggestion.name, suggestion.address)
        if key in seen:
            continue
        seen.add(key)
        unique.append(suggestion)
    return unique


def build_suggestions(
    user_input: str, predictions: Iterable[RawPrediction]
) -> list[PlaceSuggestion]:
    """
    Turn raw autocomplete predictions into ranked place suggestions for user_input.
    Keeps predictions whose city, state or country contains the input, flags exact
    matches, ranks city > state > country > partial and drops repeated name/address pairs.
    """
    needle = user_input.lower()
    parsed = (parse_prediction(prediction) for prediction in predictions)
    annotated = [
        annotate_exact_match(suggestion, needle)
        for suggestion in parsed
        if matches_input(suggestion, needle)
    ]
    return dedupe_suggestions(rank_suggestions(annotated))
