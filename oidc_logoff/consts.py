name = "oidc-logoff"
version = "0.3.0"
default_user_agent = f"{name}/{version}"

FORM_URLENCODED = "application/x-www-form-urlencoded"
