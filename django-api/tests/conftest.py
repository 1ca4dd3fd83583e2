"""Pytest configuration and shared fixtures."""

import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any

import pytest

from events.domain import Booking, BookingId, Event, EventId
from events.domain.errors import BookingNotFoundError, DuplicateSlugError, EventNotFoundError
from events.stores.interfaces import BookingStore, EventStore


class InMemoryEventStore(EventStore):
    """Dict-backed EventStore with a unique slug index."""

    def __init__(self) -> None:
        self.events: dict[EventId, Event] = {}
        self.exists_calls: list[EventId] = []
        self.update_calls: list[dict[str, Any]] = []

    def _check_slug(self, slug: str, owner: EventId | None) -> None:
        for event in self.events.values():
            if event.slug == slug and event.id != owner:
                raise DuplicateSlugError(slug)

    def list_events(self) -> list[Event]:
        return sorted(self.events.values(), key=lambda e: e.created_at, reverse=True)

    def get_event(self, event_id: EventId) -> Event | None:
        return self.events.get(event_id)

    def get_event_by_slug(self, slug: str) -> Event | None:
        return next((e for e in self.events.values() if e.slug == slug), None)

    def event_exists(self, event_id: EventId) -> bool:
        self.exists_calls.append(event_id)
        return event_id in self.events

    def create_event(self, fields: dict[str, Any]) -> Event:
        self._check_slug(fields["slug"], None)
        now = datetime.now(timezone.utc)
        event = Event(
            id=EventId(value=uuid.uuid4()),
            created_at=now,
            updated_at=now,
            **{**fields, "agenda": tuple(fields["agenda"]), "tags": tuple(fields["tags"])},
        )
        self.events[event.id] = event
        return event

    def update_event(self, event_id: EventId, fields: dict[str, Any]) -> Event:
        if event_id not in self.events:
            raise EventNotFoundError(str(event_id))
        if "slug" in fields:
            self._check_slug(fields["slug"], event_id)
        changes = dict(fields)
        for name in ("agenda", "tags"):
            if name in changes:
                changes[name] = tuple(changes[name])
        self.update_calls.append(dict(fields))
        event = replace(self.events[event_id], updated_at=datetime.now(timezone.utc), **changes)
        self.events[event_id] = event
        return event


class InMemoryBookingStore(BookingStore):
    def __init__(self) -> None:
        self.bookings: dict[BookingId, Booking] = {}
        self.update_calls: list[dict[str, Any]] = []

    def get_booking(self, booking_id: BookingId) -> Booking | None:
        return self.bookings.get(booking_id)

    def list_bookings_for_event(self, event_id: EventId) -> list[Booking]:
        return [b for b in self.bookings.values() if b.event_id == event_id]

    def create_booking(self, fields: dict[str, Any]) -> Booking:
        now = datetime.now(timezone.utc)
        booking = Booking(id=BookingId(value=uuid.uuid4()), created_at=now, updated_at=now, **fields)
        self.bookings[booking.id] = booking
        return booking

    def update_booking(self, booking_id: BookingId, fields: dict[str, Any]) -> Booking:
        if booking_id not in self.bookings:
            raise BookingNotFoundError(str(booking_id))
        self.update_calls.append(dict(fields))
        booking = replace(self.bookings[booking_id], updated_at=datetime.now(timezone.utc), **fields)
        self.bookings[booking_id] = booking
        return booking


@pytest.fixture
def event_data() -> dict[str, Any]:
    return {
        "title": "  PyCon Berlin 2025 ",
        "description": "Three days of Python talks.",
        "overview": "The community conference for Pythonistas.",
        "image": "/images/pycon.png",
        "venue": "bcc Berlin",
        "location": "Berlin, Germany",
        "date": "March 1, 2025",
        "time": "9:30 am",
        "mode": "offline",
        "audience": "Developers",
        "agenda": ["Registration", "Keynote"],
        "organizer": "PySV",
        "tags": ["python", "conference"],
    }


@pytest.fixture
def event_store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def booking_store() -> InMemoryBookingStore:
    return InMemoryBookingStore()
