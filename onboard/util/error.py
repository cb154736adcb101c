"""Utility layer errors."""


class ConfigurationError(Exception):
    """A setting holds a value the service refuses to start with."""

    def __init__(self, setting: str, reason: str):
        self.setting = setting
        self.reason = reason
        super().__init__(f"Invalid setting {setting}: {reason}")
