import httpx

from ...consts import default_user_agent


class HttpxTransport:
    """POST form bodies with an :class:`httpx.AsyncClient`.

    Any ``httpx.HTTPError`` is raised to the caller, including error status
    codes. A client passed in stays owned by the caller, otherwise one is
    created from ``client_kwargs`` and closed by :meth:`aclose`.
    """

    def __init__(self, client=None, **client_kwargs):
        self._owns_client = client is None
        if client is None:
            headers = dict(client_kwargs.pop("headers", None) or {})
            headers.setdefault("User-Agent", default_user_agent)
            client = httpx.AsyncClient(headers=headers, **client_kwargs)
        self.client = client

    async def post(self, url, body, headers):
        resp = await self.client.post(url, content=body, headers=headers)
        resp.raise_for_status()
        return resp

    async def aclose(self):
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_value, traceback):
        await self.aclose()
