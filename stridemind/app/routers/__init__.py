from .history import router as history_router

__all__ = [
    "history_router",
]
