"""oidc_logoff.urls.
~~~~~~~~~~~~~~~~~

Query string helpers for building form bodies and redirect URIs.
"""

from urllib.parse import parse_qsl
from urllib.parse import urlencode
from urllib.parse import urlparse
from urllib.parse import urlunparse


def url_encode(params):
    """Encode a list of ``(key, value)`` tuples or a dict as
    ``application/x-www-form-urlencoded``. ``None`` values are dropped.
    """
    if isinstance(params, dict):
        params = params.items()
    return urlencode([(k, v) for k, v in params if v is not None])


def url_decode(query):
    return parse_qsl(query, keep_blank_values=True)


def add_params_to_qs(query, params):
    """Extend a query with a list of two-tuples."""
    if isinstance(params, dict):
        params = list(params.items())
    qs = url_decode(query)
    qs.extend(params)
    return url_encode(qs)


def add_params_to_uri(uri, params):
    """Add a list of two-tuples to the uri query components."""
    sch, net, path, par, query, fra = urlparse(uri)
    query = add_params_to_qs(query, params)
    return urlunparse((sch, net, path, par, query, fra))


def is_secure_transport(uri):
    """Check if the uri is over ssl."""
    return uri.lower().startswith("https://")
