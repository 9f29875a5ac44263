"""Default in-process collaborators for hosts that keep the token in
memory and have no check session iframe.
"""

import logging

from .logoff.models import TokenSet

log = logging.getLogger(__name__)


class MemoryTokenStore:
    """Token store and flow reset over a single :class:`TokenSet`.

    ``reset_local_session`` forgets every token; calling it again is a no-op.
    """

    def __init__(self, token=None):
        if not isinstance(token, TokenSet):
            token = TokenSet.from_token(token)
        self.tokens = token

    def update_token(self, token):
        if not isinstance(token, TokenSet):
            token = TokenSet.from_token(token)
        self.tokens = token

    def access_token(self):
        return self.tokens.access_token

    def refresh_token(self):
        return self.tokens.refresh_token

    def id_token(self):
        return self.tokens.id_token

    def reset_local_session(self):
        if self.tokens:
            log.debug("Clearing stored tokens")
        self.tokens = TokenSet()


class StaticSessionMonitor:
    """Session monitor whose state the host sets itself, e.g. from a
    ``changed`` message of the OP check session iframe.
    """

    def __init__(self, changed=False):
        self.changed = changed

    def mark_changed(self):
        self.changed = True

    def reset(self):
        self.changed = False

    def has_server_state_changed(self):
        return self.changed
