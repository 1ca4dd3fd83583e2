"""Booking service - registrations tying an attendee email to an event."""

import logging
from collections.abc import Mapping
from typing import Any

from events.domain.errors import BookingNotFoundError, DomainError, InvalidBookingIdError
from events.domain.models import Booking
from events.domain.pipeline import prepare_booking, prepare_booking_update
from events.domain.value_objects import BookingId
from events.services.event_service import parse_event_id
from events.stores.interfaces import BookingStore, EventStore

logger = logging.getLogger(__name__)


class BookingService:
    """Service for booking operations.

    The event existence check and the booking write are separate store
    calls; the booking store re-checks the event under a row lock and
    rejects a write whose event was deleted in between.
    """

    def __init__(self, bookings: BookingStore, events: EventStore) -> None:
        self._bookings = bookings
        self._events = events

    def get_booking(self, booking_id: str) -> Booking:
        """Return a booking by ID.

        Raises:
            InvalidBookingIdError: If the booking_id is not a valid UUID.
            BookingNotFoundError: If the booking does not exist.
        """
        try:
            parsed = BookingId.from_string(booking_id)
        except (TypeError, ValueError, AttributeError) as exc:
            raise InvalidBookingIdError() from exc
        booking = self._bookings.get_booking(parsed)
        if booking is None:
            raise BookingNotFoundError(booking_id)
        return booking

    def list_bookings_for_event(self, event_id: str) -> list[Booking]:
        """Return bookings for an event.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
        """
        return self._bookings.list_bookings_for_event(parse_event_id(event_id))

    def create_booking(self, data: Mapping[str, Any]) -> Booking:
        """Check the event reference, normalize the email and persist.

        Raises:
            EventNotFoundError: If the referenced event does not exist.
            InvalidEmailError: If the email is malformed.
            DomainError: Any other validation error from the write pipeline.
        """
        try:
            fields = prepare_booking(None, data, self._events.event_exists)
            booking = self._bookings.create_booking(fields)
        except DomainError as exc:
            logger.warning("Booking create rejected: %s", exc.code.value)
            raise
        logger.info("Booking created id=%s event_id=%s", booking.id, booking.event_id)
        return booking

    def update_booking(self, booking_id: str, patch: Mapping[str, Any]) -> Booking:
        """Apply ``patch`` to an existing booking.

        The event reference is only re-checked when ``event_id`` changes.

        Raises:
            InvalidBookingIdError: If the booking_id is not a valid UUID.
            BookingNotFoundError: If the booking does not exist.
            DomainError: Any validation error from the write pipeline.
        """
        previous = self.get_booking(booking_id)
        try:
            fields = prepare_booking_update(previous, patch, self._events.event_exists)
            if not fields:
                return previous
            booking = self._bookings.update_booking(previous.id, fields)
        except DomainError as exc:
            logger.warning("Booking update rejected id=%s: %s", booking_id, exc.code.value)
            raise
        logger.info("Booking updated id=%s event_id=%s", booking.id, booking.event_id)
        return booking
