import pytest

from oidc_logoff.rpinitiated import OpenIDProviderMetadata
from oidc_logoff.rpinitiated import create_end_session_url


def test_validate_end_session_endpoint():
    metadata = OpenIDProviderMetadata()
    metadata.validate_end_session_endpoint()

    metadata = OpenIDProviderMetadata(
        {"end_session_endpoint": "http://provider.test/end_session"}
    )
    with pytest.raises(ValueError, match="https"):
        metadata.validate_end_session_endpoint()

    metadata = OpenIDProviderMetadata(
        {"end_session_endpoint": "https://provider.test/end_session"}
    )
    metadata.validate_end_session_endpoint()


def test_validate_revocation_endpoint():
    metadata = OpenIDProviderMetadata(
        {"revocation_endpoint": "http://provider.test/revoke"}
    )
    with pytest.raises(ValueError, match="revocation_endpoint"):
        metadata.validate()

    metadata = OpenIDProviderMetadata(
        {"revocation_endpoint": "https://provider.test/revoke"}
    )
    metadata.validate()
    assert metadata.revocation_endpoint == "https://provider.test/revoke"
    assert metadata.end_session_endpoint is None


def test_end_session_url_without_endpoint():
    assert create_end_session_url(None, id_token_hint="i1") is None
    assert create_end_session_url("", id_token_hint="i1") is None


def test_end_session_url():
    rv = create_end_session_url("https://provider.test/logout", id_token_hint="i1")
    assert rv == {"url": "https://provider.test/logout?id_token_hint=i1", "state": None}

    rv = create_end_session_url(
        "https://provider.test/logout?foo=bar",
        id_token_hint="i1",
        post_logout_redirect_uri="https://client.test/",
        state="s1",
        client_id="client-id",
        ui_locales="fr",
    )
    assert rv["state"] == "s1"
    assert rv["url"] == (
        "https://provider.test/logout?foo=bar&id_token_hint=i1"
        "&post_logout_redirect_uri=https%3A%2F%2Fclient.test%2F"
        "&state=s1&client_id=client-id&ui_locales=fr"
    )


def test_state_requires_redirect_uri():
    rv = create_end_session_url("https://provider.test/logout", state="s1")
    assert rv == {"url": "https://provider.test/logout", "state": None}


def test_state_is_generated_per_url():
    rv1 = create_end_session_url(
        "https://provider.test/logout", post_logout_redirect_uri="https://client.test/"
    )
    rv2 = create_end_session_url(
        "https://provider.test/logout", post_logout_redirect_uri="https://client.test/"
    )
    assert len(rv1["state"]) == 20
    assert rv1["state"] != rv2["state"]
    assert f"state={rv1['state']}" in rv1["url"]


def test_unknown_logout_parameter():
    with pytest.raises(TypeError):
        create_end_session_url(
            "https://provider.test/logout",
            post_logout_redirect_url="https://client.test/",
        )
