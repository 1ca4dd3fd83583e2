from events.stores.connection import ConnectionManager, get_connection_manager
from events.stores.interfaces import BookingStore, EventStore

__all__ = ["EventStore", "BookingStore", "ConnectionManager", "get_connection_manager"]
