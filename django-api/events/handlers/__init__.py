from events.handlers.serializers import BookingSerializer, EventSerializer

__all__ = ["EventSerializer", "BookingSerializer"]
