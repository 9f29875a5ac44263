"""Revocation of the client's tokens on the authorization server, chained
with :class:`~oidc_logoff.logoff.LogoutCoordinator`.

https://tools.ietf.org/html/rfc7009
"""

from __future__ import annotations

import logging

from ..errors import MissingTokenError
from ..errors import OidcLogoffError
from ..errors import RevocationFailedError
from ..rfc7009 import RevocationRequest
from .logout import LogoutCoordinator
from .protocols import TokenStore
from .protocols import Transport
from .protocols import UrlBuilder

log = logging.getLogger(__name__)


class RevocationOrchestrator:
    """Revokes tokens at the revocation endpoint and, once that worked,
    logs off.

    Revocation always happens before the local session is torn down. When
    a revocation fails the local session is left untouched and the error
    is raised to the caller, who may retry or call ``logoff`` directly.
    """

    def __init__(
        self,
        token_store: TokenStore,
        url_builder: UrlBuilder,
        transport: Transport,
        logout_coordinator: LogoutCoordinator,
    ):
        self.token_store = token_store
        self.url_builder = url_builder
        self.transport = transport
        self.logout_coordinator = logout_coordinator

    async def revoke_access_token(self, access_token=None):
        """Revoke an access token. If no token is given, the stored access
        token is revoked. Any token can be passed, so that applications can
        manage their own tokens.

        :return: the revocation endpoint response.
        :raise: RevocationFailedError
        """
        token = _select_token(access_token, self.token_store.access_token, "access")
        return await self._revoke("access", token, "access token")

    async def revoke_refresh_token(self, refresh_token=None):
        """Revoke a refresh token. Only needed in the code flow with refresh
        tokens. If no token is given, the stored refresh token is revoked.

        :return: the revocation endpoint response.
        :raise: RevocationFailedError
        """
        token = _select_token(refresh_token, self.token_store.refresh_token, "refresh")
        return await self._revoke("refresh", token, "refresh token")

    async def revoke_and_logoff(self, url_handler=None):
        """Revoke the refresh token and then the access token, or only the
        access token when there is no refresh token, then log off.

        :param url_handler: passed on to
            :meth:`~oidc_logoff.logoff.LogoutCoordinator.logoff`.
        :return: the response of the access token revocation.
        :raise: RevocationFailedError, in which case logoff did not run.
        """
        if self.token_store.refresh_token():
            try:
                await self.revoke_refresh_token()
                resp = await self.revoke_access_token()
            except OidcLogoffError as error:
                log.error("revoke token failed %s", error)
                raise RevocationFailedError("revoke token", error) from error
        else:
            try:
                resp = await self.revoke_access_token()
            except OidcLogoffError as error:
                log.error("revoke access token failed %s", error)
                raise RevocationFailedError("revoke access token", error) from error

        await self.logout_coordinator.async_logoff(url_handler)
        return resp

    async def _revoke(self, kind, token, reason):
        request = RevocationRequest(
            endpoint_url=self.url_builder.revocation_endpoint_url(),
            body=self.url_builder.revocation_body(kind, token),
        )
        try:
            resp = await self.transport.post(
                request.endpoint_url, request.body, request.headers
            )
        except Exception as error:
            log.error("Revocation request failed %s", error)
            raise RevocationFailedError(reason, error) from error

        log.debug("revocation endpoint post response: %r", resp)
        return resp


def _select_token(token, load_stored, kind):
    if token:
        return token
    stored = load_stored()
    if stored:
        return stored
    raise MissingTokenError(kind)
