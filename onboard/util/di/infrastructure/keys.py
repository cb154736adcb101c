"""Signing key infrastructure providers."""

from dishka import Scope, provide

from onboard.adapter.jwks import RealJWKSKeySource
from onboard.config import AuthSettings, Settings
from onboard.domain.service import KeySource
from onboard.util.di.base import ProviderBase
from onboard.util.error import ConfigurationError


def create_key_source(auth: AuthSettings) -> KeySource:
    """Build the JWKS key source described by the auth settings.

    Raises:
        ConfigurationError: If no algorithm or a symmetric one is configured
    """
    symmetric = [a for a in auth.algorithms if a.startswith("HS")]
    if symmetric or not auth.algorithms:
        raise ConfigurationError(
            "AUTH__ALGORITHMS",
            f"invitation tokens must use asymmetric algorithms, got {auth.algorithms}",
        )

    return RealJWKSKeySource(
        jwks_url=auth.jwks_url,
        timeout=auth.keys_timeout_seconds,
        cache_seconds=auth.keys_cache_seconds,
    )


class KeysProvider(ProviderBase):
    """Signing keys component base."""

    __mock_component__ = "keys"


class ProdKeysProvider(KeysProvider):
    """Production keys provider fetching the issuer's JWKS."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_key_source(self, settings: Settings) -> KeySource:
        """Provide the trusted key source.

        APP scope: the downloaded key set is shared by all requests.
        """
        return create_key_source(settings.auth)
