from ..urls import is_secure_transport


class OpenIDProviderMetadata(dict):
    """The subset of provider metadata the logoff flow reads."""

    REGISTRY_KEYS = ["end_session_endpoint", "revocation_endpoint"]

    def validate(self):
        for key in self.REGISTRY_KEYS:
            getattr(self, "validate_" + key)()

    def validate_end_session_endpoint(self):
        """Validate the end_session_endpoint parameter.

        OPTIONAL. URL at the OP to which an RP can perform a redirect to
        request that the End-User be logged out at the OP.

        This URL MUST use the "https" scheme and MAY contain port, path, and
        query parameter components.
        """
        _validate_https_url(self, "end_session_endpoint")

    def validate_revocation_endpoint(self):
        """OPTIONAL. URL of the authorization server's OAuth 2.0 revocation
        endpoint [RFC7009].
        """
        _validate_https_url(self, "revocation_endpoint")

    @property
    def end_session_endpoint(self):
        return self.get("end_session_endpoint")

    @property
    def revocation_endpoint(self):
        return self.get("revocation_endpoint")


def _validate_https_url(metadata, key):
    url = metadata.get(key)
    if url and not is_secure_transport(url):
        raise ValueError(f'"{key}" MUST use "https" scheme')
