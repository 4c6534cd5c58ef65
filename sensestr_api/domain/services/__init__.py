from .event_publisher import EventPublisher

__all__ = ["EventPublisher"]
