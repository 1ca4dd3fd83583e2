"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Mapping
from typing import Any

from events.domain.errors import DomainError, EventNotFoundError, InvalidEventIdError
from events.domain.models import Event
from events.domain.pipeline import prepare_event, prepare_event_update
from events.domain.value_objects import EventId
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


def parse_event_id(event_id: str) -> EventId:
    """Raises InvalidEventIdError for text that is not a UUID."""
    try:
        return EventId.from_string(event_id)
    except (TypeError, ValueError, AttributeError) as exc:
        raise InvalidEventIdError() from exc


class EventService:
    """Service for event catalog operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def list_events(self) -> list[Event]:
        """Return all events."""
        return self._store.list_events()

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        event = self._store.get_event(parse_event_id(event_id))
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def get_event_by_slug(self, slug: str) -> Event:
        """Return an event by slug.

        Raises:
            EventNotFoundError: If no event has the slug.
        """
        event = self._store.get_event_by_slug(slug)
        if event is None:
            raise EventNotFoundError(slug)
        return event

    def create_event(self, data: Mapping[str, Any]) -> Event:
        """Normalize and persist a new event.

        Raises:
            DomainError: Any validation error from the write pipeline, or
                DuplicateSlugError when the derived slug is taken.
        """
        try:
            fields = prepare_event(None, data)
            event = self._store.create_event(fields)
        except DomainError as exc:
            logger.warning("Event create rejected: %s", exc.code.value)
            raise
        logger.info("Event created id=%s slug=%s", event.id, event.slug)
        return event

    def update_event(self, event_id: str, patch: Mapping[str, Any]) -> Event:
        """Apply ``patch`` to an existing event.

        Slug, date and time are only recomputed when title, date or time
        change.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            DomainError: Any validation error from the write pipeline.
        """
        previous = self.get_event(event_id)
        try:
            fields = prepare_event_update(previous, patch)
            if not fields:
                return previous
            event = self._store.update_event(previous.id, fields)
        except DomainError as exc:
            logger.warning("Event update rejected id=%s: %s", event_id, exc.code.value)
            raise
        logger.info("Event updated id=%s slug=%s", event.id, event.slug)
        return event
