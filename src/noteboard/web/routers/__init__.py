from noteboard.web.routers.comments import router as comments_router
from noteboard.web.routers.notes import router as notes_router

__all__ = [
    "comments_router",
    "notes_router",
]
