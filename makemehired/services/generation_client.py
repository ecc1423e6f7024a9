"""Async HTTP client for the remote CV generation endpoint."""

from typing import Optional

import httpx
from pydantic import ValidationError

from makemehired.config import BACKEND_URL, GENERATE_PATH
from makemehired.schemas.payload import Payload
from makemehired.schemas.submission_result import GenerateResponse
from makemehired.utils.logger import get_logger

logger = get_logger(__name__)


class GenerationError(Exception):
    """The generation request failed; the message is for logs, not for users."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def generate_endpoint(base_url: str = BACKEND_URL) -> str:
    """Full URL of the generation endpoint for a backend base URL."""
    return f"{(base_url or BACKEND_URL).rstrip('/')}{GENERATE_PATH}"


async def _post(client: httpx.AsyncClient, url: str, payload: Payload) -> httpx.Response:
    return await client.post(
        url,
        json=payload.model_dump(mode="json"),
        headers={"Content-Type": "application/json"},
    )


async def request_generation(
    payload: Payload,
    base_url: str = BACKEND_URL,
    client: Optional[httpx.AsyncClient] = None,
) -> GenerateResponse:
    """
    POST the payload once and return the parsed response.
    No timeout and no retry. Raises GenerationError on transport failure,
    a non-2xx status, or a body that is not a valid GenerateResponse.
    """
    url = generate_endpoint(base_url)
    try:
        if client is not None:
            response = await _post(client, url, payload)
        else:
            async with httpx.AsyncClient(timeout=None) as own_client:
                response = await _post(own_client, url, payload)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        logger.warning("Generation HTTP error %s for %s: %s", e.response.status_code, url, e.response.text[:500])
        raise GenerationError(f"HTTP {e.response.status_code}", status_code=e.response.status_code) from e
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.warning("Generation request to %s failed: %s", url, e)
        raise GenerationError(f"Transport error: {e}") from e

    try:
        return GenerateResponse.model_validate(response.json())
    except ValueError as e:
        # json.JSONDecodeError and pydantic.ValidationError are both ValueErrors
        kind = "validation" if isinstance(e, ValidationError) else "JSON"
        logger.warning("Generation response from %s failed %s parsing: %s", url, kind, e)
        raise GenerationError(f"Unparseable response: {e}", status_code=response.status_code) from e
