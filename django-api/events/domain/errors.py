"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    BOOKING_NOT_FOUND = "BOOKING_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_BOOKING_ID = "INVALID_BOOKING_ID"
    INVALID_DATE = "INVALID_DATE"
    INVALID_TIME_FORMAT = "INVALID_TIME_FORMAT"
    INVALID_MINUTES = "INVALID_MINUTES"
    INVALID_HOURS = "INVALID_HOURS"
    EMPTY_SLUG = "EMPTY_SLUG"
    SLUG_GENERATION_FAILED = "SLUG_GENERATION_FAILED"
    REQUIRED_FIELD_MISSING = "REQUIRED_FIELD_MISSING"
    INVALID_AGENDA = "INVALID_AGENDA"
    INVALID_TAGS = "INVALID_TAGS"
    INVALID_EMAIL = "INVALID_EMAIL"
    DUPLICATE_SLUG = "DUPLICATE_SLUG"
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"
    INVALID_RECORD = "INVALID_RECORD"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class BookingNotFoundError(DomainError):
    """Raised when a booking is not found."""

    def __init__(self, booking_id: str) -> None:
        super().__init__(
            code=ErrorCode.BOOKING_NOT_FOUND,
            message="Booking not found",
        )
        self.booking_id = booking_id


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class InvalidBookingIdError(DomainError):
    """Raised when a booking ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_BOOKING_ID,
            message="Invalid booking ID format",
        )


class InvalidDateError(DomainError):
    """Raised when a date string cannot be parsed."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_DATE,
            message="Invalid date format; expected a parseable date (e.g. 2025-03-01)",
        )


class InvalidTimeFormatError(DomainError):
    """Raised when a time string has none of the accepted shapes."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TIME_FORMAT,
            message="Invalid time format; use HH:MM or h:mm AM/PM",
        )


class InvalidMinutesError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_MINUTES,
            message="Minutes must be between 00 and 59",
        )


class InvalidHoursError(DomainError):
    def __init__(self, twelve_hour: bool) -> None:
        message = (
            "Hours must be 1-12 when using AM/PM"
            if twelve_hour
            else "Hours must be between 0 and 23 for 24h time"
        )
        super().__init__(code=ErrorCode.INVALID_HOURS, message=message)


class EmptySlugError(DomainError):
    """Raised when a title yields no slug characters."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EMPTY_SLUG,
            message="Slug is empty after normalization",
        )


class SlugGenerationFailedError(DomainError):
    """Raised when an event write cannot derive a slug from its title."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.SLUG_GENERATION_FAILED,
            message="Unable to generate slug from title",
        )


class RequiredFieldMissingError(DomainError):
    """Raised when a required field is absent or blank."""

    def __init__(self, field: str) -> None:
        super().__init__(
            code=ErrorCode.REQUIRED_FIELD_MISSING,
            message=f"{field} is required",
        )
        self.field = field


class InvalidAgendaError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_AGENDA,
            message="agenda must be a non-empty array of strings",
        )


class InvalidTagsError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TAGS,
            message="tags must be a non-empty array of strings",
        )


class InvalidEmailError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EMAIL,
            message="email must be a valid email address",
        )


class DuplicateSlugError(DomainError):
    """Raised by a store when another event already owns the slug."""

    def __init__(self, slug: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_SLUG,
            message="An event with this slug already exists",
        )
        self.slug = slug


class StoreUnavailableError(DomainError):
    """Raised when the durable store cannot be reached."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.STORE_UNAVAILABLE,
            message="The event store is unavailable",
        )


class InvalidRecordError(DomainError):
    """Raised when the store rejects a field value the pipeline accepted."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_RECORD,
            message="The record contains a value the store cannot hold",
        )
