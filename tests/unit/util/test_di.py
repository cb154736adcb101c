"""Unit tests for DI provider selection and key source configuration."""

import pytest

from onboard.adapter.jwks import RealJWKSKeySource
from onboard.config import AuthSettings, Settings
from onboard.util.di import (
    KeysProvider,
    PersistenceProvider,
    ProdConfigProvider,
    select_providers,
)
from onboard.util.di.infrastructure.keys import ProdKeysProvider, create_key_source
from onboard.util.error import ConfigurationError
from tests.di import MockKeysProvider, MockPersistenceProvider, build_test_container


class TestProviderSelection:
    """Tests for implementation selection."""

    def test_selects_mock_implementation(self):
        assert KeysProvider.implementation(mock=True) is MockKeysProvider
        assert PersistenceProvider.implementation(mock=True) is MockPersistenceProvider

    def test_selects_production_implementation(self):
        assert KeysProvider.implementation(mock=False) is ProdKeysProvider

    def test_concrete_provider_used_as_is(self):
        assert ProdConfigProvider.implementation(mock=True) is ProdConfigProvider

    def test_select_providers_mocks_only_named_components(self):
        providers = select_providers(mocked={"keys"})
        kinds = {type(p) for p in providers}

        assert MockKeysProvider in kinds
        assert MockPersistenceProvider not in kinds

    def test_unknown_component_rejected(self):
        with pytest.raises(ValueError, match="Unknown components"):
            build_test_container(unmock={"mailer"})


class TestCreateKeySource:
    """Tests for create_key_source."""

    def test_builds_jwks_source_from_settings(self):
        settings = Settings(
            auth=AuthSettings(issuer_url="https://id.example.com", keys_cache_seconds=60)
        )

        source = create_key_source(settings.auth)

        assert isinstance(source, RealJWKSKeySource)
        assert source.jwks_url == "https://id.example.com/keys"
        assert source.cache_seconds == 60

    def test_symmetric_algorithm_rejected(self):
        settings = Settings(auth=AuthSettings(algorithms=["HS256"]))

        with pytest.raises(ConfigurationError) as exc_info:
            create_key_source(settings.auth)

        assert exc_info.value.setting == "AUTH__ALGORITHMS"
