"""Contracts of the collaborators the logoff flow drives. Only the methods
listed here are ever called.
"""

from __future__ import annotations

from typing import Any
from typing import Protocol


class TokenStore(Protocol):
    def access_token(self) -> str | None: ...

    def refresh_token(self) -> str | None: ...

    def id_token(self) -> str | None: ...


class UrlBuilder(Protocol):
    def revocation_body(self, kind: str, token: str) -> str:
        """Form body for revoking ``token``, ``kind`` is ``access`` or ``refresh``."""

    def revocation_endpoint_url(self) -> str: ...

    def end_session_url(self, id_token_hint: str | None) -> str | None: ...


class Transport(Protocol):
    async def post(self, url: str, body: str, headers: dict) -> Any:
        """Send the POST, raise on transport failure."""


class SessionMonitor(Protocol):
    def has_server_state_changed(self) -> bool: ...


class FlowReset(Protocol):
    def reset_local_session(self) -> None:
        """Drop every locally held authorization artifact. Idempotent."""
