from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field

from ..consts import FORM_URLENCODED
from ..urls import url_encode

#: Maps the token kind used by the logoff core to the ``token_type_hint``
#: values registered by RFC7009 Section 4.1.2.
TOKEN_TYPE_HINTS = {
    "access": "access_token",
    "refresh": "refresh_token",
}


def prepare_revoke_token_request(token, token_type_hint=None, client_id=None):
    """Construct request body for revocation endpoint, per `Section 2.1`_.

    :param token: the token value the client wants to get revoked.
    :param token_type_hint: ``access_token`` or ``refresh_token``.
    :param client_id: added to the body for public clients.
    :return: ``application/x-www-form-urlencoded`` body string.

    .. _`Section 2.1`: https://tools.ietf.org/html/rfc7009#section-2.1
    """
    if not token:
        raise ValueError('"token" is required')
    if token_type_hint and token_type_hint not in TOKEN_TYPE_HINTS.values():
        raise ValueError(f'Invalid "token_type_hint": {token_type_hint!r}')

    params = []
    if client_id:
        params.append(("client_id", client_id))
    params.append(("token", token))
    if token_type_hint:
        params.append(("token_type_hint", token_type_hint))
    return url_encode(params)


@dataclass
class RevocationRequest:
    """A single POST to the revocation endpoint. Built per call, never stored."""

    endpoint_url: str
    body: str
    content_type: str = field(default=FORM_URLENCODED, init=False)

    @property
    def headers(self):
        return {"Content-Type": self.content_type}
