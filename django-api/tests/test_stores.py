"""Integration tests for the Django ORM stores.

Run with: pytest tests/test_stores.py -v
"""

import uuid

import pytest
from django.db import DataError, OperationalError

from events import models as orm
from events.domain import BookingId, EventId
from events.domain.errors import (
    BookingNotFoundError,
    DuplicateSlugError,
    EventNotFoundError,
    InvalidRecordError,
    StoreUnavailableError,
)
from events.domain.pipeline import prepare_booking_update, prepare_event, prepare_event_update
from events.services import BookingService, EventService
from events.stores.connection import ConnectionManager
from events.stores.django_store import DjangoBookingStore, DjangoEventStore


@pytest.fixture
def connections():
    return ConnectionManager()


@pytest.fixture
def django_event_store(connections):
    return DjangoEventStore(connections)


@pytest.fixture
def django_booking_store(connections):
    return DjangoBookingStore(connections)


@pytest.fixture
def event_fields(event_data):
    return prepare_event(None, event_data)


@pytest.mark.django_db
class TestDjangoEventStore:
    """Tests for DjangoEventStore."""

    def test_create_stamps_timestamps(self, django_event_store, event_fields):
        event = django_event_store.create_event(event_fields)
        assert event.created_at is not None
        assert event.updated_at is not None
        assert event.agenda == ("Registration", "Keynote")
        assert orm.Event.objects.filter(slug="pycon-berlin-2025").exists()

    def test_duplicate_slug_is_rejected(self, django_event_store, event_fields):
        django_event_store.create_event(event_fields)
        with pytest.raises(DuplicateSlugError) as excinfo:
            django_event_store.create_event(dict(event_fields, venue="Elsewhere"))
        assert excinfo.value.slug == "pycon-berlin-2025"
        assert orm.Event.objects.count() == 1

    def test_lookups(self, django_event_store, event_fields):
        event = django_event_store.create_event(event_fields)
        assert django_event_store.get_event(event.id) == event
        assert django_event_store.get_event_by_slug("pycon-berlin-2025") == event
        assert django_event_store.event_exists(event.id)
        assert not django_event_store.event_exists(EventId(value=uuid.uuid4()))
        assert django_event_store.get_event(EventId(value=uuid.uuid4())) is None
        assert django_event_store.list_events() == [event]

    def test_update_overwrites_fields(self, django_event_store, event_fields):
        event = django_event_store.create_event(event_fields)
        updated = django_event_store.update_event(event.id, dict(event_fields, description="New"))
        assert updated.description == "New"
        assert updated.created_at == event.created_at
        assert updated.updated_at >= event.updated_at

    def test_update_to_taken_slug_keeps_record(self, django_event_store, event_fields):
        first = django_event_store.create_event(event_fields)
        second = django_event_store.create_event(dict(event_fields, title="Other", slug="other"))
        with pytest.raises(DuplicateSlugError):
            django_event_store.update_event(second.id, dict(event_fields, title="Copy", slug=first.slug))
        assert django_event_store.get_event(second.id).slug == "other"

    def test_update_missing_event(self, django_event_store, event_fields):
        with pytest.raises(EventNotFoundError):
            django_event_store.update_event(EventId(value=uuid.uuid4()), event_fields)

    def test_stale_partial_updates_keep_each_other(self, django_event_store, event_fields):
        """Two updates prepared from the same read write disjoint columns."""
        created = django_event_store.create_event(event_fields)
        description = prepare_event_update(created, {"description": "New description"})
        venue = prepare_event_update(created, {"venue": "New venue"})

        django_event_store.update_event(created.id, description)
        updated = django_event_store.update_event(created.id, venue)

        assert (updated.description, updated.venue) == ("New description", "New venue")
        row = orm.Event.objects.get(pk=created.id.value)
        assert (row.description, row.venue) == ("New description", "New venue")

    def test_long_text_values_round_trip(self, django_event_store, event_fields):
        title = "PyCon " + "Berlin " * 60
        fields = dict(
            event_fields,
            title=title.strip(),
            slug="pycon-" + "berlin-" * 59 + "berlin",
            venue="v" * 1000,
            image="/images/" + "x" * 600 + ".png",
            mode="hybrid " * 20,
        )
        event = django_event_store.create_event(fields)
        assert django_event_store.get_event(event.id).venue == "v" * 1000


@pytest.mark.django_db
class TestDjangoBookingStore:
    """Tests for DjangoBookingStore."""

    def test_create_and_list(self, django_event_store, django_booking_store, event_fields):
        event = django_event_store.create_event(event_fields)
        booking = django_booking_store.create_booking({"event_id": event.id, "email": "ada@example.com"})
        assert booking.event_id == event.id
        assert django_booking_store.get_booking(booking.id) == booking
        assert django_booking_store.list_bookings_for_event(event.id) == [booking]

    def test_vanished_event_rejected(self, django_booking_store):
        """A write that skips the existence check still cannot reference a missing event."""
        with pytest.raises(EventNotFoundError):
            django_booking_store.create_booking(
                {"event_id": EventId(value=uuid.uuid4()), "email": "ada@example.com"}
            )
        assert orm.Booking.objects.count() == 0

    def test_update_missing_booking(self, django_event_store, django_booking_store, event_fields):
        event = django_event_store.create_event(event_fields)
        with pytest.raises(BookingNotFoundError):
            django_booking_store.update_booking(
                BookingId(value=uuid.uuid4()), {"event_id": event.id, "email": "a@b.co"}
            )

    def test_stale_partial_updates_keep_each_other(
        self, django_event_store, django_booking_store, event_fields
    ):
        first = django_event_store.create_event(event_fields)
        second = django_event_store.create_event(dict(event_fields, title="Other", slug="other"))
        booking = django_booking_store.create_booking({"event_id": first.id, "email": "ada@example.com"})
        email = prepare_booking_update(booking, {"email": "grace@example.com"}, lambda _: True)
        move = prepare_booking_update(booking, {"event_id": str(second.id)}, lambda _: True)

        django_booking_store.update_booking(booking.id, email)
        updated = django_booking_store.update_booking(booking.id, move)

        assert (updated.event_id, updated.email) == (second.id, "grace@example.com")

    def test_move_to_vanished_event_keeps_booking(
        self, django_event_store, django_booking_store, event_fields
    ):
        event = django_event_store.create_event(event_fields)
        booking = django_booking_store.create_booking({"event_id": event.id, "email": "ada@example.com"})
        with pytest.raises(EventNotFoundError):
            django_booking_store.update_booking(booking.id, {"event_id": EventId(value=uuid.uuid4())})
        assert orm.Booking.objects.get(pk=booking.id.value).event_id == event.id.value


@pytest.mark.django_db
class TestServicesWithDjangoStores:
    """End-to-end write pipelines against the database."""

    def test_event_and_booking_lifecycle(self, django_event_store, django_booking_store, event_data):
        events = EventService(django_event_store)
        bookings = BookingService(django_booking_store, django_event_store)

        event = events.create_event(event_data)
        booking = bookings.create_booking({"event_id": str(event.id), "email": "  Ada@Example.COM "})
        stored = orm.Booking.objects.get(pk=booking.id.value)

        assert stored.email == "ada@example.com"
        assert stored.event_id == event.id.value

    def test_duplicate_title_rejected(self, django_event_store, event_data):
        events = EventService(django_event_store)
        events.create_event(event_data)
        with pytest.raises(DuplicateSlugError):
            events.create_event(dict(event_data, title="PYCON berlin 2025", organizer="Someone else"))

    def test_unknown_event_booking_not_persisted(self, django_event_store, django_booking_store):
        bookings = BookingService(django_booking_store, django_event_store)
        with pytest.raises(EventNotFoundError):
            bookings.create_booking({"event_id": str(uuid.uuid4()), "email": "a@b.co"})
        assert orm.Booking.objects.count() == 0


class TestStoreFailures:
    """Database driver failures surface as domain errors."""

    def test_operational_error_resets_connection(self, monkeypatch):
        connections = ConnectionManager()
        resets = []
        monkeypatch.setattr(connections, "connect", lambda: None)
        monkeypatch.setattr(connections, "reset", lambda: resets.append(True))
        store = DjangoEventStore(connections)

        def broken(*args, **kwargs):
            raise OperationalError("server closed the connection")

        monkeypatch.setattr(store, "_rows", broken)

        with pytest.raises(StoreUnavailableError):
            store.list_events()
        assert resets == [True]

    @pytest.mark.django_db
    def test_data_error_maps_to_invalid_record(self, monkeypatch):
        connections = ConnectionManager()
        resets = []
        monkeypatch.setattr(connections, "connect", lambda: None)
        monkeypatch.setattr(connections, "reset", lambda: resets.append(True))
        store = DjangoEventStore(connections)

        def rejected(*args, **kwargs):
            raise DataError("value too long for type character varying(255)")

        monkeypatch.setattr(store, "_rows", rejected)

        with pytest.raises(InvalidRecordError):
            store.create_event({"title": "x" * 300})
        assert resets == []
