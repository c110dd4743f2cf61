"""Input validation for event drafts and patches."""

from dataclasses import asdict
from datetime import date, time
from typing import Any, Dict, Mapping, Union

from ..models.event import (
    EventDraft,
    CATEGORIES,
    REQUIRED_FIELDS,
    MUTABLE_FIELDS,
    IDENTITY_FIELDS,
)
from .errors import ValidationError

TEXT_FIELDS = ('title', 'description', 'location', 'creator_id', 'creator_name')

def parse_event_date(value: str) -> date:
    """Parse an ISO calendar date, raising ValidationError on bad input."""
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid date '{value}': expected YYYY-MM-DD", ['date']) from e

def parse_event_time(value: str) -> time:
    """Parse an ISO local time of day, raising ValidationError on bad input."""
    try:
        parsed = time.fromisoformat(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid time '{value}': expected HH:MM", ['time']) from e
    # Times are local to the event; an offset would make them incomparable
    if parsed.tzinfo is not None:
        raise ValidationError(f"Invalid time '{value}': UTC offsets are not accepted", ['time'])
    return parsed

def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())

def _check_field(name: str, value: Any) -> None:
    """Validate a single present, non-blank field value."""
    if name in TEXT_FIELDS:
        if not isinstance(value, str):
            raise ValidationError(f"Field '{name}' must be a string", [name])
    elif name == 'capacity':
        # bool is an int subclass; True is not a capacity
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(f"Capacity must be an integer, got {value!r}", [name])
        if value <= 0:
            raise ValidationError(f"Capacity must be positive, got {value}", [name])
    elif name == 'category':
        if value not in CATEGORIES:
            raise ValidationError(
                f"Unknown category '{value}'. Expected one of: {', '.join(CATEGORIES)}", [name]
            )
    elif name == 'date':
        parse_event_date(value)
    elif name == 'time':
        parse_event_time(value)
    elif name == 'image_url':
        if not isinstance(value, str):
            raise ValidationError("Field 'image_url' must be a string", [name])

def validate_draft(draft: Union[EventDraft, Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Validate creator-supplied data for a new event.

    Args:
        draft: An EventDraft or a mapping with the same keys

    Returns:
        Dict of the draft's fields, ready to build an Event from

    Raises:
        ValidationError: If a required field is missing or blank, an unknown
                       field is present, or a value is invalid
    """
    if isinstance(draft, EventDraft):
        data = asdict(draft)
    elif isinstance(draft, Mapping):
        data = dict(draft)
    else:
        raise ValidationError(f"Expected an EventDraft or mapping, got {type(draft).__name__}")

    unknown = sorted(set(data) - set(REQUIRED_FIELDS) - {'image_url'})
    if unknown:
        raise ValidationError(f"Unknown fields: {', '.join(unknown)}", unknown)

    missing = [name for name in REQUIRED_FIELDS if _is_blank(data.get(name))]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}", missing)

    for name in REQUIRED_FIELDS:
        _check_field(name, data[name])

    image_url = data.get('image_url')
    if image_url is not None:
        _check_field('image_url', image_url)

    fields = {name: data[name] for name in REQUIRED_FIELDS}
    fields['image_url'] = image_url
    return fields

def validate_patch(patch: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Validate a partial update.

    Raises:
        ValidationError: If the patch touches identity fields, attendees, or
                       unknown fields, or carries an invalid value
    """
    if not isinstance(patch, Mapping):
        raise ValidationError(f"Expected a mapping, got {type(patch).__name__}")

    immutable = sorted(name for name in patch if name in IDENTITY_FIELDS or name == 'attendees')
    if immutable:
        raise ValidationError(f"Fields cannot be updated: {', '.join(immutable)}", immutable)

    unknown = sorted(name for name in patch if name not in MUTABLE_FIELDS)
    if unknown:
        raise ValidationError(f"Unknown fields: {', '.join(unknown)}", unknown)

    for name, value in patch.items():
        if name == 'image_url' and value is None:
            continue
        if _is_blank(value):
            raise ValidationError(f"Field '{name}' cannot be empty", [name])
        _check_field(name, value)

    return dict(patch)

def validate_user_id(user_id: str) -> None:
    if not isinstance(user_id, str) or not user_id.strip():
        raise ValidationError("A user id is required", ['user_id'])
