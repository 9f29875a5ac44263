class OidcLogoffError(Exception):
    """Base Exception for all errors in oidc_logoff."""

    #: short-string error code
    error = None
    #: long-string to describe this error
    description = ""
    #: web page that describes this error
    uri = None

    def __init__(self, error=None, description=None, uri=None):
        if error is not None:
            self.error = error
        if description is not None:
            self.description = description
        if uri is not None:
            self.uri = uri

        message = f"{self.error}: {self.description}"
        super().__init__(message)

    def __repr__(self):
        return f'<{self.__class__.__name__} "{self.error}">'


class RevocationFailedError(OidcLogoffError):
    """A call to the revocation endpoint did not succeed.

    ``reason`` names the step that failed (``"access token"``,
    ``"refresh token"``, ``"revoke token"`` or ``"revoke access token"``),
    ``cause`` holds the original error raised by the transport.
    """

    error = "revocation_failed"

    def __init__(self, reason, cause=None):
        self.reason = reason
        self.cause = cause
        super().__init__(description=f"{reason} failed: {cause}")


class MissingTokenError(OidcLogoffError):
    error = "missing_token"
    description = "No token was given and none is stored."

    def __init__(self, kind=None):
        self.kind = kind
        description = None
        if kind:
            description = f"No {kind} token was given and none is stored."
        super().__init__(description=description)


class MissingEndpointError(OidcLogoffError):
    error = "missing_endpoint"

    def __init__(self, endpoint_name):
        self.endpoint_name = endpoint_name
        super().__init__(description=f'Missing "{endpoint_name}" in metadata')
