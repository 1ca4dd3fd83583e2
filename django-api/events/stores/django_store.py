"""Django ORM implementation of the EventStore and BookingStore."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from django.db import DataError, IntegrityError, OperationalError, transaction

from events import models as orm
from events.domain import Booking, BookingId, Event, EventId
from events.domain.errors import (
    BookingNotFoundError,
    DuplicateSlugError,
    EventNotFoundError,
    InvalidRecordError,
    StoreUnavailableError,
)
from events.stores.connection import ConnectionManager, get_connection_manager
from events.stores.interfaces import BookingStore, EventStore

logger = logging.getLogger(__name__)


def _to_event(row: orm.Event) -> Event:
    return Event(
        id=EventId(value=row.id),
        title=row.title,
        slug=row.slug,
        description=row.description,
        overview=row.overview,
        image=row.image,
        venue=row.venue,
        location=row.location,
        date=row.date,
        time=row.time,
        mode=row.mode,
        audience=row.audience,
        agenda=tuple(row.agenda),
        organizer=row.organizer,
        tags=tuple(row.tags),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _to_booking(row: orm.Booking) -> Booking:
    return Booking(
        id=BookingId(value=row.id),
        event_id=EventId(value=row.event_id),
        email=row.email,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _booking_columns(fields: dict[str, Any]) -> dict[str, Any]:
    columns = dict(fields)
    if "event_id" in columns:
        columns["event_id"] = columns["event_id"].value
    return columns


class _DjangoStore:
    """Shared connection handling for the Django-backed stores."""

    def __init__(self, connections: ConnectionManager | None = None) -> None:
        self._connections = connections or get_connection_manager()

    @property
    def _alias(self) -> str:
        return self._connections.alias

    @contextmanager
    def _session(self) -> Iterator[None]:
        self._connections.connect()
        try:
            yield
        except DataError as exc:
            logger.warning("Store rejected a field value")
            raise InvalidRecordError() from exc
        except OperationalError as exc:
            logger.warning("Store operation failed; resetting connection")
            self._connections.reset()
            raise StoreUnavailableError() from exc


class DjangoEventStore(_DjangoStore, EventStore):
    """PostgreSQL/SQLite-backed event store using Django ORM."""

    def _rows(self):
        return orm.Event.objects.using(self._alias)

    def list_events(self) -> list[Event]:
        with self._session():
            return [_to_event(row) for row in self._rows().all()]

    def get_event(self, event_id: EventId) -> Event | None:
        with self._session():
            row = self._rows().filter(pk=event_id.value).first()
        return _to_event(row) if row is not None else None

    def get_event_by_slug(self, slug: str) -> Event | None:
        with self._session():
            row = self._rows().filter(slug=slug).first()
        return _to_event(row) if row is not None else None

    def event_exists(self, event_id: EventId) -> bool:
        with self._session():
            return self._rows().filter(pk=event_id.value).exists()

    def create_event(self, fields: dict[str, Any]) -> Event:
        with self._session():
            try:
                with transaction.atomic(using=self._alias):
                    row = self._rows().create(**fields)
            except IntegrityError as exc:
                raise DuplicateSlugError(fields.get("slug", "")) from exc
        return _to_event(row)

    def update_event(self, event_id: EventId, fields: dict[str, Any]) -> Event:
        with self._session():
            try:
                with transaction.atomic(using=self._alias):
                    row = self._rows().select_for_update().filter(pk=event_id.value).first()
                    if row is None:
                        raise EventNotFoundError(str(event_id))
                    for name, value in fields.items():
                        setattr(row, name, value)
                    row.save(using=self._alias, update_fields=[*fields, "updated_at"])
            except IntegrityError as exc:
                raise DuplicateSlugError(fields.get("slug", "")) from exc
        return _to_event(row)


class DjangoBookingStore(_DjangoStore, BookingStore):
    """PostgreSQL/SQLite-backed booking store using Django ORM.

    The referenced event row is locked and re-checked inside the write
    transaction, so an event deleted between the service's existence check
    and the write still rejects the booking.
    """

    def _rows(self):
        return orm.Booking.objects.using(self._alias)

    def _lock_event(self, event_id: EventId) -> None:
        events = orm.Event.objects.using(self._alias).select_for_update()
        if events.filter(pk=event_id.value).first() is None:
            raise EventNotFoundError(str(event_id))

    def get_booking(self, booking_id: BookingId) -> Booking | None:
        with self._session():
            row = self._rows().filter(pk=booking_id.value).first()
        return _to_booking(row) if row is not None else None

    def list_bookings_for_event(self, event_id: EventId) -> list[Booking]:
        with self._session():
            return [_to_booking(row) for row in self._rows().filter(event_id=event_id.value)]

    def create_booking(self, fields: dict[str, Any]) -> Booking:
        with self._session():
            try:
                with transaction.atomic(using=self._alias):
                    self._lock_event(fields["event_id"])
                    row = self._rows().create(**_booking_columns(fields))
            except IntegrityError as exc:
                raise EventNotFoundError(str(fields["event_id"])) from exc
        return _to_booking(row)

    def update_booking(self, booking_id: BookingId, fields: dict[str, Any]) -> Booking:
        with self._session():
            try:
                with transaction.atomic(using=self._alias):
                    row = self._rows().select_for_update().filter(pk=booking_id.value).first()
                    if row is None:
                        raise BookingNotFoundError(str(booking_id))
                    if "event_id" in fields:
                        self._lock_event(fields["event_id"])
                    columns = _booking_columns(fields)
                    for name, value in columns.items():
                        setattr(row, name, value)
                    row.save(using=self._alias, update_fields=[*columns, "updated_at"])
            except IntegrityError as exc:
                raise EventNotFoundError(str(fields.get("event_id", ""))) from exc
        return _to_booking(row)
