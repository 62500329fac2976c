from bluevelvet.presentation.api.routers.auth import router as auth_router
from bluevelvet.presentation.api.routers.categories import router as categories_router
from bluevelvet.presentation.api.routers.pages import router as pages_router

__all__ = [
    "auth_router",
    "categories_router",
    "pages_router",
]
