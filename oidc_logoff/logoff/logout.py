from __future__ import annotations

import enum
import inspect
import logging

from .protocols import FlowReset
from .protocols import SessionMonitor
from .protocols import TokenStore
from .protocols import UrlBuilder
from .sinks import BrowserSink
from .sinks import CallbackSink
from .sinks import UrlSink

log = logging.getLogger(__name__)


class LogoffOutcome(enum.Enum):
    #: local session cleared, the OP advertises no end session endpoint
    NO_END_SESSION_ENDPOINT = "no_end_session_endpoint"
    #: local session cleared, the OP session already diverged
    SERVER_SESSION_CHANGED = "server_session_changed"
    #: end session URL given to the caller supplied handler
    HANDED_OFF = "handed_off"
    #: end session URL given to the default sink
    REDIRECTED = "redirected"


class LogoutCoordinator:
    """Logs out on the local client and, when it is still safe to do so,
    on the OpenID Provider.

    The local session is always reset. The end session URL is then passed
    to a URL sink, unless the OP has no end session endpoint or the session
    monitor reports that the OP session already changed; in both cases the
    local logout is the whole outcome.

    :param token_store: read access to the current tokens.
    :param url_builder: builds the end session URL from an id token hint.
    :param session_monitor: tells whether the OP session has changed.
    :param flow_reset: clears the local authorization state.
    :param default_sink: used when ``logoff`` gets no handler, defaults to
        :class:`BrowserSink`.
    """

    def __init__(
        self,
        token_store: TokenStore,
        url_builder: UrlBuilder,
        session_monitor: SessionMonitor,
        flow_reset: FlowReset,
        default_sink: UrlSink | None = None,
    ):
        self.token_store = token_store
        self.url_builder = url_builder
        self.session_monitor = session_monitor
        self.flow_reset = flow_reset
        if default_sink is None:
            default_sink = BrowserSink()
        self.default_sink = default_sink

    def get_end_session_url(self) -> str | None:
        id_token_hint = self.token_store.id_token()
        return self.url_builder.end_session_url(id_token_hint)

    def logoff(self, url_handler=None) -> LogoffOutcome:
        """Log out locally and on the OP.

        :param url_handler: a callable or :class:`UrlSink` which takes over
            the end session URL instead of the default sink. It must not
            return an awaitable, see :meth:`async_logoff`.
        """
        outcome, sink, url = self._teardown(url_handler)
        if sink is not None:
            rv = sink.navigate(url)
            if inspect.isawaitable(rv):
                if inspect.iscoroutine(rv):
                    rv.close()
                raise TypeError(
                    "url handler returned an awaitable, use async_logoff instead"
                )
        return outcome

    async def async_logoff(self, url_handler=None) -> LogoffOutcome:
        """Same as :meth:`logoff`, awaiting the handler if it returns an
        awaitable.
        """
        outcome, sink, url = self._teardown(url_handler)
        if sink is not None:
            rv = sink.navigate(url)
            if inspect.isawaitable(rv):
                await rv
        return outcome

    def _teardown(self, url_handler):
        log.debug("logoff, remove auth")
        # read before the reset, which drops the id token hint
        try:
            end_session_url = self.get_end_session_url()
        finally:
            self.flow_reset.reset_local_session()

        if not end_session_url:
            log.debug("only local login cleaned up, no end_session_endpoint")
            return LogoffOutcome.NO_END_SESSION_ENDPOINT, None, None

        if self.session_monitor.has_server_state_changed():
            log.debug("only local login cleaned up, server session has changed")
            return LogoffOutcome.SERVER_SESSION_CHANGED, None, None

        if url_handler is None:
            return LogoffOutcome.REDIRECTED, self.default_sink, end_session_url
        return LogoffOutcome.HANDED_OFF, _as_sink(url_handler), end_session_url


def _as_sink(url_handler):
    if callable(url_handler):
        return CallbackSink(url_handler)
    if hasattr(url_handler, "navigate"):
        return url_handler
    raise TypeError(f"Invalid url handler: {url_handler!r}")
