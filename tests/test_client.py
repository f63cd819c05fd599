import asyncio
import logging

import httpx
import pytest
import respx
from httpx import Response
from vercel_client.client import (
    VercelAPIError,
    VercelClient,
    VercelClientError,
    VercelModelValidationError,
    VercelParseError,
)
from vercel_client.core.config import VercelConfig
from vercel_client.models import Project

BASE = "https://api.vercel.com"


@pytest.fixture
def client():
    return VercelClient(VercelConfig(token="mock-token"))


@pytest.mark.asyncio
@respx.mock
async def test_unexpected_status_raises_api_error_with_code(client):
    respx.get(f"{BASE}/v1/projects/missing").mock(
        return_value=Response(
            404, json={"error": {"code": "not_found", "message": "x"}}
        )
    )

    async with client:
        with pytest.raises(VercelAPIError) as exc:
            await client.projects.get_project("missing")

    assert exc.value.code == "not_found"
    assert exc.value.message == "x"
    assert exc.value.status_code == 404
    assert exc.value.method == "GET"
    assert "not_found" in str(exc.value)


@pytest.mark.asyncio
@respx.mock
async def test_error_without_message_uses_code_only(client):
    respx.get(f"{BASE}/v1/projects/p").mock(
        return_value=Response(403, json={"error": {"code": "forbidden"}})
    )

    async with client:
        with pytest.raises(VercelAPIError) as exc:
            await client.projects.get_project("p")

    assert str(exc.value) == "forbidden"


@pytest.mark.asyncio
@respx.mock
async def test_malformed_error_body_surfaces_parse_error(client):
    respx.get(f"{BASE}/v1/projects/p").mock(
        return_value=Response(500, text="<html>Bad gateway</html>")
    )

    async with client:
        with pytest.raises(VercelParseError) as exc:
            await client.projects.get_project("p")

    assert not isinstance(exc.value, VercelAPIError)
    assert "Expected JSON" in str(exc.value)


@pytest.mark.asyncio
@respx.mock
async def test_json_error_without_envelope_is_parse_error(client):
    respx.get(f"{BASE}/v1/projects/p").mock(
        return_value=Response(400, json={"message": "nope"})
    )

    async with client:
        with pytest.raises(VercelParseError):
            await client.projects.get_project("p")


@pytest.mark.asyncio
@respx.mock
async def test_non_json_success_body_raises_parse_error(client):
    respx.get(f"{BASE}/v1/projects/p").mock(
        return_value=Response(200, text="not json")
    )

    async with client:
        with pytest.raises(VercelParseError):
            await client.projects.get_project("p")


@pytest.mark.asyncio
@respx.mock
async def test_success_body_of_wrong_shape_raises_model_error(client):
    respx.get(f"{BASE}/v1/projects/p").mock(return_value=Response(200, json=[1, 2]))

    async with client:
        with pytest.raises(VercelModelValidationError):
            await client.request_model(
                Project, "GET", "/v1/projects/p", expected_status=200
            )


@pytest.mark.asyncio
@respx.mock
async def test_transport_errors_propagate_unchanged(client):
    route = respx.get(f"{BASE}/v1/projects/p").mock(
        side_effect=httpx.ConnectTimeout("boom")
    )

    async with client:
        with pytest.raises(httpx.ConnectTimeout):
            await client.projects.get_project("p")

    # no retries
    assert route.call_count == 1


@pytest.mark.asyncio
@respx.mock
async def test_transport_errors_are_not_client_errors(client):
    respx.get(f"{BASE}/v1/projects/p").mock(side_effect=httpx.ConnectError("down"))

    async with client:
        with pytest.raises(httpx.ConnectError) as exc:
            await client.projects.get_project("p")

    assert not isinstance(exc.value, VercelClientError)


@pytest.mark.asyncio
@respx.mock
async def test_concurrent_calls_share_one_client(client):
    respx.get(f"{BASE}/v1/projects/a").mock(
        return_value=Response(200, json={"id": "prj_a", "name": "a"})
    )
    respx.get(f"{BASE}/v1/projects/b").mock(
        return_value=Response(200, json={"id": "prj_b", "name": "b"})
    )

    async with client:
        a, b = await asyncio.gather(
            client.projects.get_project("a"), client.projects.get_project("b")
        )

    assert (a.id, b.id) == ("prj_a", "prj_b")


@pytest.mark.asyncio
@respx.mock
async def test_caller_deadline_cancels_in_flight_request(client, caplog):
    caplog.set_level(logging.INFO, logger="vercel_client.client")

    async def slow(request):
        await asyncio.sleep(5)
        return Response(200, json={"id": "prj_1", "name": "p"})

    route = respx.get(f"{BASE}/v1/projects/p").mock(side_effect=slow)

    async with client:
        with pytest.raises(asyncio.TimeoutError):
            await asyncio.wait_for(client.projects.get_project("p"), 0.05)

    assert route.call_count == 1
    record = next(r for r in caplog.records if r.getMessage() == "vercel_call")
    assert record.status == "exception"
    assert record.error_type == "CancelledError"


@pytest.mark.asyncio
async def test_configured_timeout_reaches_http_client():
    client = VercelClient(VercelConfig(token="mock-token", timeout_seconds=2.5))
    async with client:
        assert client.http.timeout == httpx.Timeout(2.5)


@pytest.mark.asyncio
async def test_aclose_closes_owned_http():
    client = VercelClient(VercelConfig(token="mock-token"))
    await client.aclose()
    assert client.http.is_closed
