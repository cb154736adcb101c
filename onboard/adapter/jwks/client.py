"""JWKS key source implementations.

Fetches the issuer's published signing keys (a JSON Web Key Set).
"""

import time
from typing import Any

import httpx
import jwt
import logfire

from onboard.domain.error import KeyRetrievalError
from onboard.domain.service.token_service import KeySource


def parse_jwks(data: Any) -> list[jwt.PyJWK]:
    """Parse a JWKS document into usable public keys.

    Args:
        data: Decoded JWKS JSON document

    Returns:
        Public keys from the set

    Raises:
        KeyRetrievalError: If the document holds no usable key
    """
    if not isinstance(data, dict):
        raise KeyRetrievalError("JWKS document must be a JSON object")
    try:
        return list(jwt.PyJWKSet.from_dict(data).keys)
    except jwt.PyJWKSetError as e:
        raise KeyRetrievalError(f"Unusable JWKS document: {e}")


class JWKSKeySource(KeySource):
    """Base class for JWKS-backed key sources.

    Provides type distinction for dependency injection.
    """

    pass


class RealJWKSKeySource(JWKSKeySource):
    """Key source that downloads the issuer's JWKS over HTTP.

    The downloaded set is kept for ``cache_seconds``; a failed refresh is
    never papered over with stale keys.
    """

    def __init__(
        self,
        jwks_url: str,
        timeout: float = 10.0,
        cache_seconds: int = 300,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize JWKS key source.

        Args:
            jwks_url: URL of the issuer's JWKS document
            timeout: Request timeout in seconds
            cache_seconds: How long a downloaded key set stays trusted
            transport: Optional httpx transport (tests)
        """
        self.jwks_url = jwks_url
        self.timeout = timeout
        self.cache_seconds = cache_seconds
        self._transport = transport

        self._keys: list[jwt.PyJWK] = []
        self._fetched_at: float | None = None

    async def get_trusted_keys(self) -> list[jwt.PyJWK]:
        """Return the issuer's keys, refreshing the cached set when stale.

        Returns:
            Trusted public keys

        Raises:
            KeyRetrievalError: If the key set cannot be downloaded or parsed
        """
        now = time.monotonic()
        if self._fetched_at is not None and now - self._fetched_at < self.cache_seconds:
            return self._keys

        keys = await self._fetch_keys()
        self._keys = keys
        self._fetched_at = now
        return keys

    async def _fetch_keys(self) -> list[jwt.PyJWK]:
        """Download and parse the JWKS document.

        Raises:
            KeyRetrievalError: If the request fails
        """
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(
                    self.jwks_url,
                    headers={"Accept": "application/json"},
                    timeout=self.timeout,
                )

                if response.status_code != 200:
                    logfire.error(
                        "JWKS request failed",
                        url=self.jwks_url,
                        status_code=response.status_code,
                    )
                    raise KeyRetrievalError(
                        f"JWKS request failed: {response.status_code}"
                    )

                data = response.json()

        except httpx.HTTPError as e:
            logfire.error("JWKS HTTP error", url=self.jwks_url, error=str(e))
            raise KeyRetrievalError(f"HTTP error fetching JWKS: {e}")
        except ValueError as e:
            logfire.error("JWKS response is not JSON", url=self.jwks_url, error=str(e))
            raise KeyRetrievalError(f"Invalid JWKS response: {e}")

        keys = parse_jwks(data)
        logfire.info("JWKS refreshed", url=self.jwks_url, count=len(keys))
        return keys


class MockJWKSKeySource(JWKSKeySource):
    """Mock key source for testing.

    Serves a fixed JWKS document without making network calls.
    """

    def __init__(self, jwks: dict[str, Any]):
        """Initialize mock key source.

        Args:
            jwks: JWKS document to serve
        """
        self.jwks = jwks

    async def get_trusted_keys(self) -> list[jwt.PyJWK]:
        """Return the keys from the fixed document."""
        return parse_jwks(self.jwks)
