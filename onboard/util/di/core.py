"""Configuration providers."""

from dishka import Scope, provide

from onboard.config import AuthSettings, PasswordSettings, Settings
from onboard.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings, read once from the environment and ``.env``.

    The nested sections are exposed separately so services depend only on
    the part they use.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_password_settings(self, settings: Settings) -> PasswordSettings:
        return settings.password
