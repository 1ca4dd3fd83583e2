"""Write pipelines for events and bookings.

Each pipeline takes the previously stored record (``None`` on creation) and
the candidate patch, and returns the complete normalized field set the store
should persist. Any rule violation raises a ``DomainError`` before the store
is touched, so a rejected write never leaves partial changes behind. The
``*_update`` variants narrow that set to the columns that actually change.
"""

from collections.abc import Callable, Mapping
from dataclasses import asdict
from typing import Any
from uuid import UUID

from events.domain.errors import (
    EmptySlugError,
    EventNotFoundError,
    InvalidAgendaError,
    InvalidEmailError,
    InvalidEventIdError,
    InvalidTagsError,
    RequiredFieldMissingError,
    SlugGenerationFailedError,
)
from events.domain.models import Booking, Event
from events.domain.normalizers import normalize_date, normalize_time, slugify
from events.domain.validators import (
    is_non_empty_text,
    is_non_empty_text_sequence,
    is_valid_email,
    normalize_email,
)
from events.domain.value_objects import EventId

EVENT_REQUIRED_TEXT_FIELDS = (
    "title",
    "description",
    "overview",
    "image",
    "venue",
    "location",
    "date",
    "time",
    "mode",
    "audience",
    "organizer",
)
EVENT_SEQUENCE_FIELDS = ("agenda", "tags")
EVENT_WRITABLE_FIELDS = EVENT_REQUIRED_TEXT_FIELDS + EVENT_SEQUENCE_FIELDS


def _event_fields(event: Event) -> dict[str, Any]:
    fields = asdict(event)
    fields["agenda"] = list(event.agenda)
    fields["tags"] = list(event.tags)
    return {name: fields[name] for name in EVENT_WRITABLE_FIELDS + ("slug",)}


def _clean_event_patch(patch: Mapping[str, Any]) -> dict[str, Any]:
    cleaned = {}
    for name in EVENT_WRITABLE_FIELDS:
        if name not in patch:
            continue
        value = patch[name]
        if isinstance(value, str):
            value = value.strip()
        elif isinstance(value, tuple):
            value = list(value)
        cleaned[name] = value
    return cleaned


def prepare_event(previous: Event | None, patch: Mapping[str, Any]) -> dict[str, Any]:
    """Merge ``patch`` into ``previous`` and normalize the result.

    Slug, date and time are only recomputed when their source field is part
    of the patch and differs from the stored value (always, on creation).

    Raises:
        SlugGenerationFailedError: If the title yields an empty slug.
        InvalidDateError: If the date cannot be parsed.
        InvalidTimeFormatError, InvalidMinutesError, InvalidHoursError:
            If the time cannot be normalized.
        RequiredFieldMissingError: On the first blank required text field.
        InvalidAgendaError, InvalidTagsError: If either list is empty or
            holds blank items.
    """
    changes = _clean_event_patch(patch)
    record = _event_fields(previous) if previous is not None else {}
    record.update(changes)

    def changed(name: str) -> bool:
        if name not in changes or not is_non_empty_text(changes[name]):
            return False
        return previous is None or changes[name] != getattr(previous, name)

    if changed("title"):
        try:
            record["slug"] = slugify(record["title"])
        except EmptySlugError as exc:
            raise SlugGenerationFailedError() from exc

    if changed("date"):
        record["date"] = normalize_date(record["date"])

    if changed("time"):
        record["time"] = normalize_time(record["time"])

    for name in EVENT_REQUIRED_TEXT_FIELDS:
        if not is_non_empty_text(record.get(name)):
            raise RequiredFieldMissingError(name)

    if not is_non_empty_text_sequence(record.get("agenda")):
        raise InvalidAgendaError()
    if not is_non_empty_text_sequence(record.get("tags")):
        raise InvalidTagsError()

    return record


def prepare_event_update(previous: Event, patch: Mapping[str, Any]) -> dict[str, Any]:
    """Run ``prepare_event`` and keep only the fields that differ from ``previous``.

    Stores write just these columns, so concurrent updates touching
    different fields do not overwrite each other.
    """
    record = prepare_event(previous, patch)
    stored = _event_fields(previous)
    return {name: value for name, value in record.items() if stored.get(name) != value}


def _resolve_event_id(value: Any) -> EventId:
    if isinstance(value, EventId):
        return value
    if isinstance(value, UUID):
        return EventId(value=value)
    try:
        return EventId.from_string(str(value))
    except ValueError as exc:
        raise InvalidEventIdError() from exc


def prepare_booking(
    previous: Booking | None,
    patch: Mapping[str, Any],
    event_exists: Callable[[EventId], bool],
) -> dict[str, Any]:
    """Merge ``patch`` into ``previous``, check the event reference and email.

    ``event_exists`` is only consulted on creation or when the patch points
    the booking at a different event.

    Raises:
        RequiredFieldMissingError: If ``event_id`` or ``email`` is missing.
        InvalidEventIdError: If ``event_id`` is not a UUID.
        EventNotFoundError: If the referenced event does not exist.
        InvalidEmailError: If the normalized email is malformed.
    """
    record: dict[str, Any] = {}
    if previous is not None:
        record = {"event_id": previous.event_id, "email": previous.email}

    if patch.get("event_id") is not None:
        record["event_id"] = _resolve_event_id(patch["event_id"])
    if "event_id" not in record:
        raise RequiredFieldMissingError("event_id")

    if previous is None or record["event_id"] != previous.event_id:
        if not event_exists(record["event_id"]):
            raise EventNotFoundError(str(record["event_id"]))

    if "email" in patch:
        record["email"] = patch["email"]
    email = record.get("email")
    if not is_non_empty_text(email):
        raise RequiredFieldMissingError("email")
    email = normalize_email(email)
    if not is_valid_email(email):
        raise InvalidEmailError()
    record["email"] = email

    return record


def prepare_booking_update(
    previous: Booking,
    patch: Mapping[str, Any],
    event_exists: Callable[[EventId], bool],
) -> dict[str, Any]:
    """Run ``prepare_booking`` and keep only the fields that differ from ``previous``."""
    record = prepare_booking(previous, patch, event_exists)
    return {name: value for name, value in record.items() if getattr(previous, name) != value}
