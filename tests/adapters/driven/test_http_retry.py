"""Tests for the transient-error retry decorator."""

from unittest.mock import AsyncMock, Mock, patch

import aiohttp
import pytest

from src.adapters.driven.http.client import HttpTransport
from src.adapters.driven.http.retry import RETRYABLE_ERRORS, retry
from src.core.builder import HttpRequestBuilder
from src.core.errors import InvalidRequestConfigError
from src.core.verb import HttpVerb

__all__ = []


@pytest.mark.asyncio
@pytest.mark.parametrize("exc_type", RETRYABLE_ERRORS)
async def test_retry_gives_up_after_all_attempts(exc_type: type[BaseException]) -> None:
    """Transient errors should be retried until attempts run out."""
    mock_fn = AsyncMock(side_effect=exc_type(Mock(), Mock()))
    wrapped = retry(times=3)(mock_fn)

    with (
        patch("src.adapters.driven.http.retry.asyncio.sleep", new=AsyncMock()),
        pytest.raises(exc_type),
    ):
        await wrapped()

    assert mock_fn.call_count == 3


@pytest.mark.asyncio
async def test_retry_recovers_after_transient_error() -> None:
    """A success after a transient failure should be returned."""
    fake_response = AsyncMock()
    fake_response.status = 200
    mock_fn = AsyncMock(side_effect=[aiohttp.ServerTimeoutError(), fake_response])
    mock_sleep = AsyncMock()

    with patch("src.adapters.driven.http.retry.asyncio.sleep", mock_sleep):
        result = await retry(times=3, delay_sec=(0.1, 0.2))(mock_fn)()

    assert result is fake_response
    assert mock_fn.call_count == 2
    mock_sleep.assert_awaited_once_with(0.1)


@pytest.mark.asyncio
async def test_retry_does_not_retry_request_errors() -> None:
    """Request core errors are permanent and propagate immediately."""
    mock_fn = AsyncMock(side_effect=InvalidRequestConfigError("bad request"))
    wrapped = retry(times=3)(mock_fn)

    with pytest.raises(InvalidRequestConfigError):
        await wrapped()

    assert mock_fn.call_count == 1


@pytest.mark.asyncio
async def test_retry_delays_use_last_delay_when_exhausted() -> None:
    """Attempts beyond the delay tuple reuse its last entry."""
    mock_fn = AsyncMock(side_effect=aiohttp.ClientConnectionError())
    mock_sleep = AsyncMock()

    with (
        patch("src.adapters.driven.http.retry.asyncio.sleep", mock_sleep),
        pytest.raises(aiohttp.ClientConnectionError),
    ):
        await retry(times=4, delay_sec=(0.1, 0.2))(mock_fn)()

    assert [c.args[0] for c in mock_sleep.await_args_list] == [0.1, 0.2, 0.2]


@pytest.mark.asyncio
async def test_transport_retries_idempotent_request_without_re_marking() -> None:
    """Retried PUT should be sent again but marked only once."""
    transport = HttpTransport()
    transport.session = AsyncMock()
    fake_response = AsyncMock()
    fake_response.status = 200
    transport.session.request = AsyncMock(
        side_effect=[aiohttp.ClientOSError(), fake_response]
    )
    request = HttpRequestBuilder(HttpVerb.PUT, "example.com", "/api/settings").with_arguments(
        {"lang": "en"}
    ).build()

    with patch("src.adapters.driven.http.retry.asyncio.sleep", new=AsyncMock()):
        resp = await transport.send(request)

    assert resp is fake_response
    assert transport.session.request.await_count == 2
    assert request.is_executed is True


@pytest.mark.asyncio
@pytest.mark.parametrize("verb", [HttpVerb.POST, HttpVerb.PATCH])
async def test_transport_does_not_retry_non_idempotent_request(verb: HttpVerb) -> None:
    """POST and PATCH should reach the wire at most once."""
    transport = HttpTransport()
    transport.session = AsyncMock()
    transport.session.request = AsyncMock(side_effect=aiohttp.ClientOSError())
    request = HttpRequestBuilder(verb, "example.com", "/api/vote").with_arguments(
        {"dir": "1"}
    ).build()

    with (
        patch("src.adapters.driven.http.retry.asyncio.sleep", new=AsyncMock()) as mock_sleep,
        pytest.raises(aiohttp.ClientOSError),
    ):
        await transport.send(request)

    assert transport.session.request.await_count == 1
    mock_sleep.assert_not_awaited()
