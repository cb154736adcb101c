"""JWKS key source adapter."""

from .client import (
    JWKSKeySource,
    MockJWKSKeySource,
    RealJWKSKeySource,
    parse_jwks,
)

__all__ = ["JWKSKeySource", "RealJWKSKeySource", "MockJWKSKeySource", "parse_jwks"]
