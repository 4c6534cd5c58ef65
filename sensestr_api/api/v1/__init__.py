from .health_controller import router as health_router
from .device_controller import router as device_router
from .session_controller import router as session_router
from .viewer_controller import router as viewer_router


# Collection name -> router
resource_routers = {
    "devices": device_router,
    "sessions": session_router,
    "viewers": viewer_router,
}

__all__ = ["health_router", "device_router", "session_router", "viewer_router", "resource_routers"]
