"""
Service layer for greetings.

Greetings are picked from a small table of templates keyed by
language code.  Unknown or missing language codes fall back to
English; the code is still echoed back to the caller unchanged.
"""

import logging
from typing import Optional

from crud_demo_api.app.core.config import settings
from crud_demo_api.app.core.errors import ValidationError
from crud_demo_api.app.schemas.greet import GreetInput, GreetResponse

logger = logging.getLogger(__name__)

DEFAULT_LANG = "en"

GREETING_TEMPLATES = {
    "en": "Hello, {name}!",
    "he": "שלום, {name}!",
    "es": "¡Hola, {name}!",
}

GREET_INFO = "This endpoint demonstrates reading data from query parameters."


def missing_name_payload() -> dict:
    base = settings.public_url
    return {
        "error": 'Missing query parameter: "name".',
        "how_to_use": 'Send a GET request with a "name" query parameter.',
        "example_url": f"{base}/greet?name=David",
        "accepted_types": {
            "name": "string (required)",
            "lang": 'string (optional, default: "en", options: "en" | "he" | "es")',
        },
        "example_curl": f'curl "{base}/greet?name=David&lang=en"',
    }


class GreetingService:
    """Builds greeting messages."""

    @staticmethod
    def render(name: str, lang: str) -> str:
        template = GREETING_TEMPLATES.get(lang, GREETING_TEMPLATES[DEFAULT_LANG])
        return template.format(name=name)

    @classmethod
    async def greet(cls, name: Optional[str], lang: Optional[str] = None) -> GreetResponse:
        """Greet ``name`` in ``lang``.

        Raises ``ValidationError`` when ``name`` is missing or empty.
        """
        if not name:
            logger.info("Rejected greeting: missing name")
            raise ValidationError(missing_name_payload())
        if lang is None:
            lang = DEFAULT_LANG
        return GreetResponse(
            input=GreetInput(name=name, lang=lang),
            result=cls.render(name, lang),
            info=GREET_INFO,
        )
