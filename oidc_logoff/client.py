import logging

from .integrations.httpx_client import HttpxTransport
from .logoff import LogoutCoordinator
from .logoff import RevocationOrchestrator
from .stores import MemoryTokenStore
from .stores import StaticSessionMonitor
from .url_builder import MetadataUrlBuilder

__all__ = ["LogoffClient"]

log = logging.getLogger(__name__)


class LogoffClient:
    """Wire the logoff flow for one OpenID Provider::

        client = LogoffClient(
            client_id="my-client",
            server_metadata={
                "revocation_endpoint": "https://op.test/revoke",
                "end_session_endpoint": "https://op.test/logout",
            },
            post_logout_redirect_uri="https://app.test/",
            token=token,
        )
        async with client:
            await client.revoke_and_logoff(handle_redirect)

    Every collaborator can be replaced by keyword argument; the defaults are
    an in-memory token store, a metadata based URL builder, an httpx
    transport and a session monitor which never reports a change.
    """

    #: keys read by :meth:`from_config`
    OAUTH_APP_CONFIG = (
        "client_id",
        "server_metadata",
        "post_logout_redirect_uri",
        "client_kwargs",
    )

    def __init__(
        self,
        client_id=None,
        server_metadata=None,
        post_logout_redirect_uri=None,
        token=None,
        client_kwargs=None,
        token_store=None,
        url_builder=None,
        transport=None,
        session_monitor=None,
        flow_reset=None,
        default_sink=None,
        logout_hint=None,
        ui_locales=None,
    ):
        if token_store is None:
            token_store = MemoryTokenStore(token)
        if flow_reset is None:
            if not hasattr(token_store, "reset_local_session"):
                raise ValueError('Missing "flow_reset" for custom token store')
            flow_reset = token_store
        if url_builder is None:
            url_builder = MetadataUrlBuilder(
                server_metadata,
                client_id=client_id,
                post_logout_redirect_uri=post_logout_redirect_uri,
                logout_hint=logout_hint,
                ui_locales=ui_locales,
            )
        if transport is None:
            transport = HttpxTransport(**(client_kwargs or {}))
        if session_monitor is None:
            session_monitor = StaticSessionMonitor()

        self.client_id = client_id
        self.token_store = token_store
        self.url_builder = url_builder
        self.transport = transport
        self.session_monitor = session_monitor
        self.logout_coordinator = LogoutCoordinator(
            token_store, url_builder, session_monitor, flow_reset, default_sink
        )
        self.revocation = RevocationOrchestrator(
            token_store, url_builder, transport, self.logout_coordinator
        )

    @classmethod
    def from_config(cls, config, prefix="", **kwargs):
        """Create a client from a framework config mapping, e.g. Flask's
        ``app.config``, using upper case keys such as ``CLIENT_ID`` or
        ``{PREFIX}_CLIENT_ID``.
        """
        params = {}
        for key in cls.OAUTH_APP_CONFIG:
            conf_key = key.upper()
            if prefix:
                conf_key = f"{prefix.upper()}_{conf_key}"
            value = config.get(conf_key)
            if value is not None:
                params[key] = value
        log.debug("Loaded logoff config %r", sorted(params))
        params.update(kwargs)
        return cls(**params)

    def get_end_session_url(self):
        return self.logout_coordinator.get_end_session_url()

    def logoff(self, url_handler=None):
        return self.logout_coordinator.logoff(url_handler)

    async def async_logoff(self, url_handler=None):
        return await self.logout_coordinator.async_logoff(url_handler)

    async def revoke_access_token(self, access_token=None):
        return await self.revocation.revoke_access_token(access_token)

    async def revoke_refresh_token(self, refresh_token=None):
        return await self.revocation.revoke_refresh_token(refresh_token)

    async def revoke_and_logoff(self, url_handler=None):
        return await self.revocation.revoke_and_logoff(url_handler)

    async def aclose(self):
        aclose = getattr(self.transport, "aclose", None)
        if aclose is not None:
            await aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_value, traceback):
        await self.aclose()
