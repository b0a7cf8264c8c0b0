"""Caller-token verification (ES256).

campus-service does not log anyone in.  An upstream identity provider
signs short-lived access tokens; this module verifies them and hands the
``sub`` claim to the API layer as the caller identity.

Key management:
  - TOKEN_PUBLIC_KEY_PATH set: load the provider's EC public key (PEM).
    Tokens can only be verified, not minted, in this process.
  - unset (dev/test): generate an ephemeral EC key pair on import so
    tests and local tooling can mint tokens with create_access_token().
"""

from __future__ import annotations

import uuid
from datetime import UTC, datetime, timedelta
from pathlib import Path

import jwt
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from campus.core.config import SETTINGS

ALGORITHM = "ES256"
ISSUER = "campus-identity"
AUDIENCE = "campus-service"
ACCESS_TOKEN_TTL_MIN = 15


def _load_keys(
    public_key_path: str | None,
) -> tuple[ec.EllipticCurvePrivateKey | None, ec.EllipticCurvePublicKey]:
    if public_key_path is None:
        private_key = ec.generate_private_key(ec.SECP256R1())
        return private_key, private_key.public_key()

    public_key = serialization.load_pem_public_key(Path(public_key_path).read_bytes())
    if not isinstance(public_key, ec.EllipticCurvePublicKey):
        raise ValueError("TOKEN_PUBLIC_KEY_PATH must hold an EC public key")
    return None, public_key


_private_key, _public_key = _load_keys(SETTINGS.token_public_key_path)


def create_access_token(*, sub: str, ttl_minutes: int = ACCESS_TOKEN_TTL_MIN) -> str:
    """Sign a caller token with the ephemeral dev key.

    Raises RuntimeError when the service is configured with an external
    public key, since it holds no private key then.
    """
    if _private_key is None:
        raise RuntimeError("token minting is only available with the dev key pair")
    now = datetime.now(UTC)
    payload = {
        "sub": sub,
        "iss": ISSUER,
        "aud": AUDIENCE,
        "exp": now + timedelta(minutes=ttl_minutes),
        "iat": now,
        "jti": str(uuid.uuid4()),
    }
    return jwt.encode(payload, _private_key, algorithm=ALGORITHM)


def decode_access_token(token: str) -> dict:
    """Verify signature and claims, return the payload.

    Pins algorithm to ES256 to prevent alg:none and alg-switching attacks.
    Validates exp, iss, and aud automatically via PyJWT options.

    Raises jwt.ExpiredSignatureError, jwt.InvalidTokenError on failure.
    """
    return jwt.decode(
        token,
        _public_key,
        algorithms=[ALGORITHM],
        issuer=ISSUER,
        audience=AUDIENCE,
        options={"require": ["sub", "exp", "iat"]},
    )
