"""oidc_logoff.rpinitiated.
~~~~~~~~~~~~~~~~~~~~~~~~

Relying Party side of OpenID Connect RP-Initiated Logout 1.0.

https://openid.net/specs/openid-connect-rpinitiated-1_0.html
"""

from .discovery import OpenIDProviderMetadata
from .end_session import create_end_session_url

__all__ = ["OpenIDProviderMetadata", "create_end_session_url"]
