"""
Shared httpx.AsyncClient for the backend REST API.

One client per process: connection pooling, base URL, JSON headers and the
transport timeout all live here so driven adapters only deal with paths.
"""

from typing import Any
from urllib.parse import quote

import httpx
import orjson

from src.platform.config.core_setting import Settings
from src.platform.exception.exceptions import TransientNetworkError


JSON_HEADERS = {
    'Accept': 'application/json',
    'Content-Type': 'application/json',
    'Cache-Control': 'no-store',
}


def create_api_client(
    settings: Settings, transport: httpx.AsyncBaseTransport | None = None
) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=settings.API_BASE_URL,
        headers=JSON_HEADERS,
        timeout=httpx.Timeout(settings.HTTP_TIMEOUT_SECONDS),
        limits=httpx.Limits(max_connections=settings.HTTP_MAX_CONNECTIONS),
        transport=transport,
    )


async def send_request(
    client: httpx.AsyncClient, method: str, path: str, **kwargs: Any
) -> httpx.Response:
    """Send one request; anything that prevents an HTTP answer becomes TransientNetworkError."""
    try:
        return await client.request(method, path, **kwargs)
    except httpx.TimeoutException as e:
        raise TransientNetworkError(f'{method} {path} timed out: {e}', 504) from e
    except httpx.TransportError as e:
        raise TransientNetworkError(f'{method} {path} failed: {e}') from e


def decode_json(response: httpx.Response) -> Any:
    return orjson.loads(response.content)


def response_detail(response: httpx.Response) -> Any:
    """Backend error body for diagnostics: parsed JSON when possible, raw text otherwise."""
    try:
        return decode_json(response)
    except orjson.JSONDecodeError:
        return response.text


def build_path(template: str, **params: Any) -> str:
    """Fill a path template; each value becomes exactly one encoded path segment."""
    return template.format(**{key: quote(str(value), safe='') for key, value in params.items()})


def decode_json_body(response: httpx.Response, expected: type) -> Any:
    """
    JSON body of a successful response, checked against its top-level type.

    Non-2xx statuses keep their own status code; an unreadable or mis-shaped
    body from a successful response is reported as 502 (bad upstream answer).
    All of them raise TransientNetworkError.
    """
    target = f'{response.request.method} {response.request.url.path}'
    if not response.is_success:
        raise TransientNetworkError(
            f'{target} returned {response.status_code}', response.status_code
        )
    try:
        payload = decode_json(response)
    except orjson.JSONDecodeError as e:
        raise TransientNetworkError(f'{target} returned a non-JSON body', 502) from e
    if not isinstance(payload, expected):
        raise TransientNetworkError(
            f'{target} returned JSON {type(payload).__name__}, expected {expected.__name__}',
            502,
        )
    return payload
