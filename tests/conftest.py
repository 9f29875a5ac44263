from unittest import mock

import pytest

from oidc_logoff.logoff import LogoutCoordinator
from oidc_logoff.logoff import RevocationOrchestrator
from oidc_logoff.stores import MemoryTokenStore
from oidc_logoff.stores import StaticSessionMonitor
from oidc_logoff.url_builder import MetadataUrlBuilder

REVOCATION_ENDPOINT = "https://idp.example/revoke"
END_SESSION_ENDPOINT = "https://idp.example/end"


class RecordingTransport:
    """Records every POST in ``events`` and fails for the token kinds listed
    in ``fail_on``.
    """

    def __init__(self, events, fail_on=()):
        self.events = events
        self.fail_on = set(fail_on)
        self.requests = []

    async def post(self, url, body, headers):
        kind = "refresh" if "token_type_hint=refresh_token" in body else "access"
        self.requests.append((url, body, headers))
        self.events.append(("revoke", kind))
        if kind in self.fail_on:
            raise ConnectionError("network unreachable")
        return {"status": 200, "kind": kind}


class RecordingStore(MemoryTokenStore):
    def __init__(self, events, token=None):
        super().__init__(token)
        self.events = events

    def reset_local_session(self):
        self.events.append(("reset",))
        super().reset_local_session()


@pytest.fixture
def events():
    return []


@pytest.fixture
def token():
    return {
        "token_type": "Bearer",
        "access_token": "a1",
        "refresh_token": "r1",
        "id_token": "i1",
        "expires_in": 3600,
    }


@pytest.fixture
def store(events, token):
    return RecordingStore(events, token)


@pytest.fixture
def server_metadata():
    return {
        "revocation_endpoint": REVOCATION_ENDPOINT,
        "end_session_endpoint": END_SESSION_ENDPOINT,
    }


@pytest.fixture
def url_builder(server_metadata):
    return MetadataUrlBuilder(server_metadata, client_id="client-id")


@pytest.fixture
def session_monitor():
    return StaticSessionMonitor()


@pytest.fixture
def sink(events):
    sink = mock.MagicMock()
    sink.navigate.side_effect = lambda url: events.append(("navigate", url))
    return sink


@pytest.fixture
def coordinator(store, url_builder, session_monitor, sink):
    return LogoutCoordinator(store, url_builder, session_monitor, store, sink)


@pytest.fixture
def transport(events):
    return RecordingTransport(events)


@pytest.fixture
def orchestrator(store, url_builder, transport, coordinator):
    return RevocationOrchestrator(store, url_builder, transport, coordinator)
