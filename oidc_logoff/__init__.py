"""oidc_logoff.
~~~~~~~~~~~

Session termination and token revocation for OpenID Connect clients.
"""

from .client import LogoffClient
from .consts import version
from .errors import MissingEndpointError
from .errors import MissingTokenError
from .errors import OidcLogoffError
from .errors import RevocationFailedError
from .logoff import LogoffOutcome
from .logoff import LogoutCoordinator
from .logoff import RevocationOrchestrator
from .logoff import TokenSet

__version__ = version

__all__ = [
    "LogoffClient",
    "LogoffOutcome",
    "LogoutCoordinator",
    "RevocationOrchestrator",
    "TokenSet",
    "OidcLogoffError",
    "RevocationFailedError",
    "MissingTokenError",
    "MissingEndpointError",
]
