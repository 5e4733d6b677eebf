"""Errors raised while wiring the application."""


class UtilError(Exception):
    """Base utility error."""


class ConfigurationError(UtilError):
    """A setting is missing or unsafe for the current environment."""

    def __init__(self, setting: str, reason: str) -> None:
        self.setting = setting
        super().__init__(f"{setting}: {reason}")


class DependencyInjectionError(UtilError):
    """The container cannot be assembled as requested."""
