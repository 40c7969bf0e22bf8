"""Internal messaging between the simulation core and its observers."""
from .event_bus import EventBus

__all__ = ["EventBus"]
