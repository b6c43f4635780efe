"""
Validation for marker create requests.

The request body arrives as untyped JSON. Each check below runs in a fixed
order and the first failure is reported, so the same bad payload always
yields the same message.
"""
import math
import typing as t
try:
    from .models import NewMarker
except ImportError:
    from models import NewMarker

REQUIRED_FIELDS = ("latitude", "longitude", "website", "siteName")

# (field, message) in the order they are checked
OPTIONAL_TEXT_FIELDS = (
    ("siteDescription", "Site description must be a string"),
    ("ownerName", "Owner name must be a string"),
    ("ownerDescription", "Owner description must be a string"),
    ("ownerWebsite", "Owner website must be a string"),
)


class MarkerValidationError(ValueError):
    """Raised when a create payload can be fixed by the client."""


def _is_number(value: t.Any) -> bool:
    # bool is an int subclass but not a coordinate
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    # inf and nan cannot be stored or sent back as JSON
    try:
        return math.isfinite(float(value))
    except OverflowError:
        return False


def _present(data: dict, field: str) -> bool:
    return field in data and data[field] is not None


def validate_marker_payload(data: t.Any) -> NewMarker:
    if not isinstance(data, dict):
        raise MarkerValidationError("Request body must be a JSON object")

    missing = [f for f in REQUIRED_FIELDS if not _present(data, f)]
    if missing:
        raise MarkerValidationError(f"Missing required fields: {', '.join(missing)}")

    if not _is_number(data["latitude"]) or not _is_number(data["longitude"]):
        raise MarkerValidationError("Latitude and longitude must be numbers")

    if not isinstance(data["website"], str) or not isinstance(data["siteName"], str):
        raise MarkerValidationError("Website and site name must be strings")

    for field, message in OPTIONAL_TEXT_FIELDS:
        if _present(data, field) and not isinstance(data[field], str):
            raise MarkerValidationError(message)

    if _present(data, "isAnonymous") and not isinstance(data["isAnonymous"], bool):
        raise MarkerValidationError("isAnonymous must be a boolean")

    return NewMarker(
        latitude=float(data["latitude"]),
        longitude=float(data["longitude"]),
        website=data["website"],
        siteName=data["siteName"],
        siteDescription=data.get("siteDescription"),
        ownerName=data.get("ownerName"),
        ownerDescription=data.get("ownerDescription"),
        ownerWebsite=data.get("ownerWebsite"),
        isAnonymous=bool(data.get("isAnonymous") or False),
    )
