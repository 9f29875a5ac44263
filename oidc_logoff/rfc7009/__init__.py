"""oidc_logoff.rfc7009.
~~~~~~~~~~~~~~~~~~~~

Client side of OAuth 2.0 Token Revocation.

https://tools.ietf.org/html/rfc7009
"""

from .parameters import TOKEN_TYPE_HINTS
from .parameters import RevocationRequest
from .parameters import prepare_revoke_token_request

__all__ = ["TOKEN_TYPE_HINTS", "RevocationRequest", "prepare_revoke_token_request"]
