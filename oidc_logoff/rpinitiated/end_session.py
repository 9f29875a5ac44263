from __future__ import annotations

from ..security import generate_token
from ..urls import add_params_to_uri


def create_end_session_url(
    end_session_endpoint: str | None,
    id_token_hint: str | None = None,
    post_logout_redirect_uri: str | None = None,
    state: str | None = None,
    client_id: str | None = None,
    logout_hint: str | None = None,
    ui_locales: str | None = None,
) -> dict | None:
    """Generate the end session URL for RP-Initiated Logout.

    :param end_session_endpoint: ``end_session_endpoint`` of the OP.
    :param id_token_hint: ID Token previously issued to the RP.
    :param post_logout_redirect_uri: URI to redirect after logout.
    :param state: Opaque value for maintaining state, generated when a
        ``post_logout_redirect_uri`` is given without one.
    :return: dict with 'url' and 'state' keys, or None when the OP has no
        end session endpoint.
    """
    if not end_session_endpoint:
        return None

    params = []
    if id_token_hint:
        params.append(("id_token_hint", id_token_hint))
    if post_logout_redirect_uri:
        params.append(("post_logout_redirect_uri", post_logout_redirect_uri))
        if state is None:
            state = generate_token(20)
        params.append(("state", state))
    else:
        # rpinitiated §2: state is only echoed back on post logout redirection
        state = None

    for key, value in (
        ("client_id", client_id),
        ("logout_hint", logout_hint),
        ("ui_locales", ui_locales),
    ):
        if value:
            params.append((key, value))

    url = add_params_to_uri(end_session_endpoint, params)
    return {"url": url, "state": state}
