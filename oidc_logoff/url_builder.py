from __future__ import annotations

from .errors import MissingEndpointError
from .rfc7009 import TOKEN_TYPE_HINTS
from .rfc7009 import prepare_revoke_token_request
from .rpinitiated import OpenIDProviderMetadata
from .rpinitiated import create_end_session_url


class MetadataUrlBuilder:
    """Build revocation requests and the end session URL from the
    authorization server metadata.

    :param server_metadata: provider metadata dict, only
        ``revocation_endpoint`` and ``end_session_endpoint`` are read.
    :param client_id: sent with revocation requests and the logout URL.
    :param post_logout_redirect_uri: where the OP sends the user back to.
    :param logout_hint: hint about the End-User that is logging out.
    :param ui_locales: preferred languages for the OP logout pages.

    Each end session URL with a ``post_logout_redirect_uri`` carries a
    fresh ``state``, the last one is kept in :attr:`end_session_state` so
    that the application can check it on the way back.
    """

    def __init__(
        self,
        server_metadata: dict | None = None,
        client_id: str | None = None,
        post_logout_redirect_uri: str | None = None,
        logout_hint: str | None = None,
        ui_locales: str | None = None,
    ):
        metadata = OpenIDProviderMetadata(server_metadata or {})
        metadata.validate()
        self.server_metadata = metadata
        self.client_id = client_id
        self.post_logout_redirect_uri = post_logout_redirect_uri
        self.logout_hint = logout_hint
        self.ui_locales = ui_locales
        self.end_session_state = None

    def revocation_endpoint_url(self) -> str:
        url = self.server_metadata.revocation_endpoint
        if not url:
            raise MissingEndpointError("revocation_endpoint")
        return url

    def revocation_body(self, kind: str, token: str) -> str:
        return prepare_revoke_token_request(
            token,
            token_type_hint=TOKEN_TYPE_HINTS[kind],
            client_id=self.client_id,
        )

    def end_session_url(self, id_token_hint: str | None) -> str | None:
        rv = create_end_session_url(
            self.server_metadata.end_session_endpoint,
            id_token_hint=id_token_hint,
            post_logout_redirect_uri=self.post_logout_redirect_uri,
            client_id=self.client_id,
            logout_hint=self.logout_hint,
            ui_locales=self.ui_locales,
        )
        if rv is None:
            return None
        self.end_session_state = rv["state"]
        return rv["url"]
