"""Static HTML pages served next to the API."""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse, RedirectResponse

PAGES_DIR = Path(__file__).resolve().parents[2] / "web" / "pages"

router = APIRouter(include_in_schema=False)


def _page(name: str) -> FileResponse:
    return FileResponse(PAGES_DIR / f"{name}.html", media_type="text/html")


@router.get("/")
async def index() -> RedirectResponse:
    return RedirectResponse(url="/login")


@router.get("/login")
async def login_page() -> FileResponse:
    return _page("login")


@router.get("/register")
async def register_page() -> FileResponse:
    return _page("register")


@router.get("/dashboard")
async def dashboard_page() -> FileResponse:
    return _page("dashboard")
