"""Static API token resolution for bearer authentication."""

import hmac

from pydantic import SecretStr

from app.core.config import Settings

ROOT_LOGIN = "root"
USER_LOGIN = "user"


class InvalidTokenError(Exception):
    """Raised when a bearer token matches neither configured secret."""


def _matches(secret: SecretStr | None, token: str) -> bool:
    if secret is None:
        return False
    return hmac.compare_digest(
        secret.get_secret_value().encode("utf-8"),
        token.encode("utf-8"),
    )


def resolve_login(token: str, settings: Settings) -> str:
    """
    Map a bearer token to the fixed login it grants ("root" or "user").

    Comparison is constant-time and both secrets are always checked.
    Raises InvalidTokenError when the token matches neither secret.
    """
    is_root = _matches(settings.ROOT_API_TOKEN, token)
    is_user = _matches(settings.USER_API_TOKEN, token)
    if is_root:
        return ROOT_LOGIN
    if is_user:
        return USER_LOGIN
    raise InvalidTokenError("Invalid API token.")
