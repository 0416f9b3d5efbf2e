# src/huddle/web/pages.py
"""Routes serving the login, registration and chat pages."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"

router = APIRouter(include_in_schema=False)


@lru_cache(maxsize=None)
def load_page(name: str) -> str:
    """Return the contents of a bundled HTML page."""
    return (TEMPLATE_DIR / f"{name}.html").read_text(encoding="utf-8")


@router.get("/", response_class=HTMLResponse)
async def login_page() -> HTMLResponse:
    return HTMLResponse(load_page("login"))


@router.get("/register", response_class=HTMLResponse)
async def register_page() -> HTMLResponse:
    return HTMLResponse(load_page("register"))


@router.get("/chat", response_class=HTMLResponse)
async def chat_page() -> HTMLResponse:
    return HTMLResponse(load_page("chat"))
