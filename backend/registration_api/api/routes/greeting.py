"""Greeting Routes — plain-text hello endpoints.

Invariants:
    - GET / returns exactly "Hello!"
    - GET /hello/{name} returns "Hello!, <name>!" with the decoded path value verbatim
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["greeting"])


def format_greeting(name: str | None = None) -> str:
    if name is None:
        return "Hello!"
    return f"Hello!, {name}!"


@router.get("/", response_class=PlainTextResponse)
async def root_greeting():
    return format_greeting()


@router.get("/hello/{name}", response_class=PlainTextResponse)
async def named_greeting(name: str):
    """Greet the caller by the name in the path."""
    return format_greeting(name)
