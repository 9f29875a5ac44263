import logging
import webbrowser
from typing import Any
from typing import Protocol

log = logging.getLogger(__name__)


class UrlSink(Protocol):
    """Receives the end session URL once logoff decided to leave the app."""

    def navigate(self, url: str) -> Any: ...


class CallbackSink:
    """Hands the URL over to a caller supplied function, for hosts which
    own navigation themselves (web frameworks, native shells).
    """

    def __init__(self, handler):
        self.handler = handler

    def navigate(self, url):
        return self.handler(url)


class BrowserSink:
    """Opens the URL in the user's browser."""

    def __init__(self, new=0, autoraise=True):
        self.new = new
        self.autoraise = autoraise

    def navigate(self, url):
        log.debug("Redirecting to end session endpoint %r", url)
        if not webbrowser.open(url, new=self.new, autoraise=self.autoraise):
            log.warning("No browser available to open %r", url)
