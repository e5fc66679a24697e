"""Service layer for the shout endpoint."""

import logging

from crud_demo_api.app.core.config import settings
from crud_demo_api.app.core.errors import ValidationError
from crud_demo_api.app.schemas.shout import ShoutInput, ShoutResponse, ShoutResult

logger = logging.getLogger(__name__)

LONG_WORD_THRESHOLD = 5

SHOUT_INFO = "This endpoint demonstrates reading data from a path parameter."


def missing_word_payload() -> dict:
    base = settings.public_url
    return {
        "error": 'Missing path parameter: "word".',
        "how_to_use": "Send a PUT request with a word in the URL path.",
        "example_url": f"{base}/shout/hello",
        "accepted_types": {"word": "string (required)"},
        "example_curl": f"curl -X PUT {base}/shout/hello",
    }


class TextService:
    """String transformations."""

    @classmethod
    async def shout(cls, word: str) -> ShoutResponse:
        # The route pattern requires a segment, so this only triggers
        # when the service is called directly.
        if not word:
            logger.info("Rejected shout: empty word")
            raise ValidationError(missing_word_payload())
        length = len(word)
        return ShoutResponse(
            input=ShoutInput(word=word),
            result=ShoutResult(
                uppercased=word.upper(),
                length=length,
                is_long=length > LONG_WORD_THRESHOLD,
            ),
            info=SHOUT_INFO,
        )
