from .router import router as profile_router
from .service import ProfileService

__all__ = ["profile_router", "ProfileService"]
