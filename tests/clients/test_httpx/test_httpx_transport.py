import httpx
import pytest

from oidc_logoff.consts import default_user_agent
from oidc_logoff.integrations.httpx_client import HttpxTransport

FORM_HEADERS = {"Content-Type": "application/x-www-form-urlencoded"}


def mock_transport(status_code=200, assert_func=None):
    def handler(request):
        if assert_func:
            assert_func(request)
        return httpx.Response(status_code)

    return httpx.MockTransport(handler)


@pytest.mark.asyncio
async def test_post_form_body():
    def verifier(request):
        assert request.method == "POST"
        assert str(request.url) == "https://provider.test/revoke"
        assert request.content == b"token=a1&token_type_hint=access_token"
        assert request.headers["Content-Type"] == FORM_HEADERS["Content-Type"]
        assert request.headers["User-Agent"] == default_user_agent

    async with HttpxTransport(transport=mock_transport(assert_func=verifier)) as t:
        resp = await t.post(
            "https://provider.test/revoke",
            "token=a1&token_type_hint=access_token",
            FORM_HEADERS,
        )
    assert resp.status_code == 200


@pytest.mark.asyncio
async def test_error_status_raises():
    async with HttpxTransport(transport=mock_transport(503)) as t:
        with pytest.raises(httpx.HTTPStatusError):
            await t.post("https://provider.test/revoke", "token=a1", FORM_HEADERS)


@pytest.mark.asyncio
async def test_network_error_raises():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    async with HttpxTransport(transport=httpx.MockTransport(handler)) as t:
        with pytest.raises(httpx.ConnectError):
            await t.post("https://provider.test/revoke", "token=a1", FORM_HEADERS)


@pytest.mark.asyncio
async def test_given_client_is_not_closed():
    client = httpx.AsyncClient(transport=mock_transport())
    async with HttpxTransport(client):
        pass
    assert not client.is_closed
    await client.aclose()
