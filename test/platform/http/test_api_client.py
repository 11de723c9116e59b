"""
Unit tests for the shared API client helpers

Test Focus:
1. Client construction from Settings
2. Transport failures and timeouts become TransientNetworkError
3. Error body extraction for diagnostics
4. Path templating and top-level JSON shape checks
"""

import httpx
import orjson
import pytest

from src.platform.config.core_setting import Settings
from src.platform.exception.exceptions import TransientNetworkError
from src.platform.http.api_client import (
    build_path,
    create_api_client,
    decode_json,
    decode_json_body,
    response_detail,
    send_request,
)


def _client(handler) -> httpx.AsyncClient:
    return create_api_client(Settings(), transport=httpx.MockTransport(handler))


@pytest.mark.unit
class TestCreateApiClient:
    @pytest.mark.asyncio
    async def test_uses_base_url_and_json_headers(self):
        # Arrange
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={})

        # Act
        async with _client(handler) as client:
            await client.get('/api/bookings')

        # Assert
        assert str(seen[0].url) == 'http://testserver/api/bookings'
        assert seen[0].headers['accept'] == 'application/json'

    def test_base_url_trailing_slash_is_dropped(self):
        settings = Settings(API_BASE_URL='http://api.example.com/')

        assert settings.API_BASE_URL == 'http://api.example.com'


@pytest.mark.unit
class TestSendRequest:
    @pytest.mark.asyncio
    async def test_error_statuses_are_returned_not_raised(self):
        # Arrange
        async with _client(lambda request: httpx.Response(503)) as client:
            # Act
            response = await send_request(client, 'GET', '/api/bookings')

        # Assert
        assert response.status_code == 503

    @pytest.mark.asyncio
    async def test_connect_error_is_transient(self):
        # Arrange
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError('refused', request=request)

        # Act & Assert
        async with _client(handler) as client:
            with pytest.raises(TransientNetworkError) as exc_info:
                await send_request(client, 'GET', '/api/bookings')

        assert exc_info.value.retryable is True
        assert exc_info.value.status_code == 503

    @pytest.mark.asyncio
    async def test_timeout_is_transient_504(self):
        # Arrange
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectTimeout('slow', request=request)

        # Act & Assert
        async with _client(handler) as client:
            with pytest.raises(TransientNetworkError) as exc_info:
                await send_request(client, 'POST', '/api/bookings/sno/T-1/scan', json={})

        assert exc_info.value.status_code == 504


@pytest.mark.unit
class TestResponseBodies:
    def test_decode_json(self):
        assert decode_json(httpx.Response(200, json={'booking': None})) == {'booking': None}

    def test_response_detail_prefers_json(self):
        assert response_detail(httpx.Response(400, json={'detail': 'x'})) == {'detail': 'x'}

    def test_response_detail_falls_back_to_text(self):
        assert response_detail(httpx.Response(502, text='Bad Gateway')) == 'Bad Gateway'


def _response(status: int, **kwargs) -> httpx.Response:
    return httpx.Response(
        status, request=httpx.Request('GET', 'http://testserver/api/bookings'), **kwargs
    )


@pytest.mark.unit
class TestBuildPath:
    @pytest.mark.parametrize(
        'sno,expected',
        [
            ('T-001', '/api/bookings/sno/T-001'),
            ('QR#2024-000017', '/api/bookings/sno/QR%232024-000017'),
            ('A?x=1', '/api/bookings/sno/A%3Fx%3D1'),
            ('T/42', '/api/bookings/sno/T%2F42'),
            ('T 42', '/api/bookings/sno/T%2042'),
        ],
    )
    def test_value_becomes_one_encoded_segment(self, sno, expected):
        assert build_path('/api/bookings/sno/{sno}', sno=sno) == expected

    def test_non_string_values_are_formatted(self):
        assert build_path('/api/events/{event_id}/register', event_id=7) == (
            '/api/events/7/register'
        )


@pytest.mark.unit
class TestDecodeJsonBody:
    def test_matching_shape_is_returned(self):
        assert decode_json_body(_response(200, json=[{'id': 1}]), list) == [{'id': 1}]

    @pytest.mark.parametrize('body', [[], 'x', 1, None])
    def test_wrong_shape_is_transient_502(self, body):
        # Arrange
        response = _response(200, content=orjson.dumps(body))

        # Act & Assert
        with pytest.raises(TransientNetworkError) as exc_info:
            decode_json_body(response, dict)

        assert exc_info.value.status_code == 502
        assert 'expected dict' in str(exc_info.value)

    def test_non_json_body_is_transient_502(self):
        with pytest.raises(TransientNetworkError) as exc_info:
            decode_json_body(_response(200, text='<html>'), dict)

        assert exc_info.value.status_code == 502

    def test_error_status_keeps_its_code(self):
        with pytest.raises(TransientNetworkError) as exc_info:
            decode_json_body(_response(500, json={'detail': 'x'}), dict)

        assert exc_info.value.status_code == 500
