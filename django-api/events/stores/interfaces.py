"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from typing import Any

from events.domain import Booking, BookingId, Event, EventId


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events ordered by created_at descending."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def get_event_by_slug(self, slug: str) -> Event | None:
        """Return an event by slug, or None if not found."""
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...

    @abstractmethod
    def create_event(self, fields: dict[str, Any]) -> Event:
        """Persist a new event and stamp its timestamps.

        Raises:
            DuplicateSlugError: If another event already has the slug.
        """
        ...

    @abstractmethod
    def update_event(self, event_id: EventId, fields: dict[str, Any]) -> Event:
        """Write only the given fields of an existing event and stamp updated_at.

        Raises:
            EventNotFoundError: If the event no longer exists.
            DuplicateSlugError: If another event already has the slug.
        """
        ...


class BookingStore(ABC):
    """Interface for booking persistence operations."""

    @abstractmethod
    def get_booking(self, booking_id: BookingId) -> Booking | None:
        """Return a booking by ID, or None if not found."""
        ...

    @abstractmethod
    def list_bookings_for_event(self, event_id: EventId) -> list[Booking]:
        """Return the bookings for an event ordered by created_at descending."""
        ...

    @abstractmethod
    def create_booking(self, fields: dict[str, Any]) -> Booking:
        """Persist a new booking and stamp its timestamps.

        Raises:
            EventNotFoundError: If the referenced event vanished before the write.
        """
        ...

    @abstractmethod
    def update_booking(self, booking_id: BookingId, fields: dict[str, Any]) -> Booking:
        """Write only the given fields of an existing booking and stamp updated_at.

        Raises:
            BookingNotFoundError: If the booking no longer exists.
            EventNotFoundError: If the referenced event vanished before the write.
        """
        ...
