from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TokenSet:
    """Tokens the client currently holds. Any of them may be absent."""

    access_token: str | None = None
    refresh_token: str | None = None
    id_token: str | None = None

    @classmethod
    def from_token(cls, token: dict | None) -> TokenSet:
        """Build from an OAuth 2.0 token response dict."""
        if not token:
            return cls()
        return cls(
            access_token=token.get("access_token") or None,
            refresh_token=token.get("refresh_token") or None,
            id_token=token.get("id_token") or None,
        )

    def __bool__(self):
        return any((self.access_token, self.refresh_token, self.id_token))
