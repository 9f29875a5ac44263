"""oidc_logoff.logoff.
~~~~~~~~~~~~~~~~~~~

Orders token revocation before local and server side session teardown.
"""

from .logout import LogoffOutcome
from .logout import LogoutCoordinator
from .models import TokenSet
from .protocols import FlowReset
from .protocols import SessionMonitor
from .protocols import TokenStore
from .protocols import Transport
from .protocols import UrlBuilder
from .revocation import RevocationOrchestrator
from .sinks import BrowserSink
from .sinks import CallbackSink
from .sinks import UrlSink

__all__ = [
    "LogoffOutcome",
    "LogoutCoordinator",
    "RevocationOrchestrator",
    "TokenSet",
    "TokenStore",
    "UrlBuilder",
    "Transport",
    "SessionMonitor",
    "FlowReset",
    "UrlSink",
    "CallbackSink",
    "BrowserSink",
]
