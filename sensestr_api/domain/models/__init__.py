from .identity import Identity
from .resource import Resource
from .device import Device
from .session import Session
from .viewer import Viewer

__all__ = ["Identity", "Resource", "Device", "Session", "Viewer"]
