import asyncio
import json
import logging

import httpx

from config import Settings

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """Base for failures that end in a fixed user-facing reply."""
    user_message = "Sorry, I couldn't generate a reply right now. Please try again."


class UpstreamUnavailable(GenerationError):
    """Network error, timeout or non-2xx status from the generative API."""


class MalformedResponse(GenerationError):
    user_message = "Error processing the response. Please try again."


class EmptyReply(GenerationError):
    user_message = "No reply could be generated. Please try again."


def build_payload(prompt: str) -> dict:
    return {"contents": [{"parts": [{"text": prompt}]}]}


def extract_text(body: str) -> str:
    """
    Pull candidates[0].content.parts[0].text out of a generateContent body.
    Raises EmptyReply when there is nothing usable and MalformedResponse
    when the body is not JSON or the path has the wrong shape.
    """
    try:
        data = json.loads(body)
    except (TypeError, ValueError, RecursionError) as e:
        logger.warning("Response parsing error: %s", e)
        raise MalformedResponse(str(e)) from e

    candidates = data.get("candidates") if isinstance(data, dict) else None
    if not isinstance(candidates, (list, dict)) or not candidates:
        raise EmptyReply("no candidates")

    try:
        part = candidates[0]["content"]["parts"][0]
    except (KeyError, IndexError, TypeError) as e:
        logger.warning("Response parsing error: %r", e)
        raise MalformedResponse(repr(e)) from e

    text = part.get("text") if isinstance(part, dict) else None
    if isinstance(text, bool):
        text = "true" if text else "false"
    elif isinstance(text, (int, float)):
        text = str(text)
    if not isinstance(text, str) or not text.strip():
        raise EmptyReply("empty text")
    return text


class GeminiClient:
    """Thin wrapper over one shared httpx.AsyncClient for generateContent calls."""

    def __init__(self, settings: Settings, http: httpx.AsyncClient):
        self.settings = settings
        self.http = http

    async def complete(self, prompt: str) -> str:
        body = await self._post(prompt)
        return extract_text(body)

    async def _post(self, prompt: str) -> str:
        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": self.settings.api_key,
        }
        try:
            r = await asyncio.wait_for(
                self.http.post(
                    self.settings.api_url,
                    headers=headers,
                    json=build_payload(prompt),
                    timeout=self.settings.timeout,
                ),
                timeout=self.settings.timeout,
            )
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "API Error: %s -> %s", e.response.status_code, e.response.text[:200]
            )
            raise UpstreamUnavailable(str(e)) from e
        except (httpx.HTTPError, asyncio.TimeoutError) as e:
            logger.error("API Error: %r", e)
            raise UpstreamUnavailable(repr(e)) from e
        except Exception as e:
            logger.exception("Unexpected error calling the generative API")
            raise UpstreamUnavailable(repr(e)) from e
        return r.text
