# portfolio/gateway/functions.py
"""Callable functions exposed through ``Gateway.invoke``."""
import json
import logging
import re
from typing import Any, Callable, Dict

import httpx
from flask import current_app

logger = logging.getLogger(__name__)

GEMINI_MODEL = "gemini-2.0-flash-exp"
GEMINI_URL = (
    "https://generativelanguage.googleapis.com/v1beta/models/"
    f"{GEMINI_MODEL}:generateContent"
)

CONTENT_FIELDS = ("title", "meta", "subheading", "excerpt", "body")

CONTENT_PROMPT = (
    "You are an expert blog writer for a personal portfolio. Write a high-quality, "
    "SEO-optimized blog post for the following topic. Return ONLY a valid JSON object "
    "with these exact keys: title, meta (SEO meta description), subheading, excerpt "
    "(1-2 sentence summary), and body (full markdown content).\n\n"
    "Topic: {prompt}\n\n"
    "Return the response as a JSON object with NO additional text or formatting "
    "outside the JSON."
)

_JSON_BLOCK = re.compile(r"\{.*\}", re.DOTALL)


class FunctionError(Exception):
    pass


def _parse_generated_text(text: str) -> Dict[str, Any]:
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        match = _JSON_BLOCK.search(text)
        if not match:
            raise FunctionError("AI response is not valid JSON")
        try:
            return json.loads(match.group(0))
        except json.JSONDecodeError as exc:
            raise FunctionError("AI response is not valid JSON") from exc


def generate_content(body: Dict[str, Any]) -> Dict[str, Any]:
    """
    Ask Gemini for a blog post draft.

    Returns the five content fields, or ``{"error": ...}`` on any failure.
    """
    try:
        prompt = (body or {}).get("prompt")
        if not prompt:
            raise FunctionError("Prompt is required")

        api_key = current_app.config.get("GEMINI_API_KEY")
        if not api_key:
            raise FunctionError("GEMINI_API_KEY is not configured")

        logger.info("Generating content for prompt: %s", prompt)

        response = httpx.post(
            GEMINI_URL,
            params={"key": api_key},
            json={
                "contents": [{"parts": [{"text": CONTENT_PROMPT.format(prompt=prompt)}]}],
                "generationConfig": {
                    "temperature": 0.7,
                    "maxOutputTokens": 2048,
                    "responseMimeType": "application/json",
                },
            },
            timeout=current_app.config.get("GEMINI_TIMEOUT", 60),
        )

        if response.is_error:
            logger.error("Gemini API error: %s %s", response.status_code, response.text)
            raise FunctionError(f"Gemini API error: {response.status_code}")

        data = response.json()
        try:
            text = data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            text = None
        if not text:
            raise FunctionError("No response from AI")

        result = _parse_generated_text(text)

        for name in CONTENT_FIELDS:
            if not result.get(name):
                raise FunctionError(f"Missing required field: {name}")

        return {name: result[name] for name in CONTENT_FIELDS}

    except FunctionError as exc:
        logger.error("generate-content failed: %s", exc)
        return {"error": str(exc)}
    except httpx.HTTPError as exc:
        logger.error("generate-content request failed: %s", exc)
        return {"error": "Failed to generate content"}


FUNCTIONS: Dict[str, Callable[[Dict[str, Any]], Dict[str, Any]]] = {
    "generate-content": generate_content,
}
