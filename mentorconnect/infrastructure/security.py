"""Token helpers for the session snapshot."""

from datetime import datetime, timezone

from jose import JWTError, jwt


def read_token_claims(token: str) -> dict:
    """Return the claims of ``token`` without verifying its signature.

    The signing key belongs to the auth backend, so the claims are only used
    for display.
    """

    try:
        return jwt.get_unverified_claims(token)
    except JWTError as exc:
        raise ValueError("Could not read token claims") from exc


def token_expires_at(token: str | None) -> datetime | None:
    """Return the ``exp`` claim of ``token`` as an aware datetime, if any."""

    if not token:
        return None
    try:
        claims = read_token_claims(token)
    except ValueError:
        return None

    expires = claims.get("exp")
    if not isinstance(expires, (int, float)):
        return None
    try:
        return datetime.fromtimestamp(expires, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


__all__ = ["read_token_claims", "token_expires_at"]
