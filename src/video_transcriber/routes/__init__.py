from .transcribe import router as transcribe_router
from .videos import router as videos_router

__all__ = ["transcribe_router", "videos_router"]
