# portfolio/application/content.py
import logging
from typing import Any, Dict

from portfolio.domain.invariants.fields import assert_required
from portfolio.gateway import Gateway, GatewayError

logger = logging.getLogger(__name__)

GENERATE_CONTENT = "generate-content"
CONTENT_FIELDS = ("title", "meta", "subheading", "excerpt", "body")


class ContentGenerationError(GatewayError):
    """The AI writer answered with an error or an incomplete draft."""


def generate_blog_content(*, gateway: Gateway, prompt: str) -> Dict[str, Any]:
    """
    Ask the content function for a blog draft.

    The draft is only returned when every field is present; the caller maps
    ``body`` onto the post content.
    """
    assert_required({"prompt": prompt}, "prompt")

    result = gateway.invoke(GENERATE_CONTENT, {"prompt": str(prompt).strip()})

    if result.get("error"):
        raise ContentGenerationError(result["error"])

    missing = [field for field in CONTENT_FIELDS if not result.get(field)]
    if missing:
        logger.error("Generated content is missing fields: %s", missing)
        raise ContentGenerationError(f"Missing required field: {missing[0]}")

    return {field: result[field] for field in CONTENT_FIELDS}
