"""Invitation token utilities.

Invitation tokens are JWTs signed by the issuer with an asymmetric key. They
are never stored: every request rebuilds and re-verifies the claims from the
presented string.
"""

from datetime import datetime
from typing import Sequence
from uuid import UUID

import jwt
from pydantic import BaseModel, ValidationError

INVITATION_PURPOSE = "invitation"

# Claim carrying the fingerprint of the account's password hash at issuance
CLAIM_PASSWORD_FINGERPRINT = "pwd_fp"

# Claim carrying the optional post-invitation redirect target
CLAIM_CALLBACK = "callback"


class InvitationClaims(BaseModel):
    """Verified invitation token payload."""

    subject: UUID
    email: str
    issuer: str
    expires_at: datetime
    issued_at: datetime | None = None
    not_before: datetime | None = None
    purpose: str
    password_fingerprint: str
    callback: str | None = None
    client_id: str | None = None


class TokenError(Exception):
    """Invitation token is malformed, expired or not trusted."""

    pass


def _candidate_keys(
    token: str, keys: Sequence[jwt.PyJWK], algorithms: Sequence[str]
) -> list[jwt.PyJWK]:
    """Select the keys worth trying for this token.

    Only keys of the algorithm named in the header qualify, and only when
    that algorithm is accepted; a key set may mix key types.

    Raises:
        TokenError: If the header cannot be parsed or names no accepted algorithm
    """
    try:
        header = jwt.get_unverified_header(token)
    except jwt.InvalidTokenError:
        raise TokenError("Malformed token")

    alg = header.get("alg")
    if alg not in algorithms:
        raise TokenError(f"Token algorithm not accepted: {alg}")

    kid = header.get("kid")
    return [
        key
        for key in keys
        if key.algorithm_name == alg and (kid is None or key.key_id == kid)
    ]


def verify_invitation_token(
    token: str,
    issuer: str,
    keys: Sequence[jwt.PyJWK],
    algorithms: Sequence[str] = ("RS256",),
    leeway: int = 0,
) -> InvitationClaims:
    """Verify and decode an invitation token.

    Args:
        token: Encoded JWT presented by the user
        issuer: Expected issuer identity
        keys: Currently trusted public keys
        algorithms: Accepted signing algorithms
        leeway: Clock skew tolerance in seconds for exp/nbf

    Returns:
        Invitation claims if the token is valid

    Raises:
        TokenError: If token is malformed, expired, wrongly signed or issued
    """
    if not token:
        raise TokenError("Missing token")

    candidates = _candidate_keys(token, keys, algorithms)
    if not candidates:
        raise TokenError("No trusted key matches the token")

    payload = None
    for key in candidates:
        try:
            payload = jwt.decode(
                token,
                key,
                algorithms=[key.algorithm_name],
                issuer=issuer,
                leeway=leeway,
                options={
                    "require": ["exp", "iss", "sub"],
                    "verify_aud": False,
                },
            )
            break
        except jwt.InvalidSignatureError:
            continue
        except jwt.ExpiredSignatureError:
            raise TokenError("Token has expired")
        except jwt.ImmatureSignatureError:
            raise TokenError("Token is not yet valid")
        except jwt.InvalidIssuerError:
            raise TokenError("Token has an unexpected issuer")
        except jwt.InvalidTokenError as e:
            raise TokenError(f"Invalid token: {e}")
        except jwt.PyJWTError as e:
            raise TokenError(f"Unusable key for token: {e}")

    if payload is None:
        raise TokenError("Token signature not verified by any trusted key")

    if payload.get("purpose") != INVITATION_PURPOSE:
        raise TokenError("Token is not an invitation")

    try:
        return InvitationClaims(
            subject=payload["sub"],
            email=payload["email"],
            issuer=payload["iss"],
            expires_at=payload["exp"],
            issued_at=payload.get("iat"),
            not_before=payload.get("nbf"),
            purpose=payload["purpose"],
            password_fingerprint=payload[CLAIM_PASSWORD_FINGERPRINT],
            callback=payload.get(CLAIM_CALLBACK),
            client_id=_client_id(payload.get("aud")),
        )
    except (KeyError, ValidationError) as e:
        raise TokenError(f"Invalid invitation claims: {e}")


def _client_id(aud: str | list[str] | None) -> str | None:
    """Reduce the audience claim to the requesting client."""
    if isinstance(aud, list):
        return aud[0] if aud else None
    return aud
