"""Application-layer errors: failed logins and bad configuration."""

from __future__ import annotations

from passlab.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Failure raised by a use case rather than by the domain model."""

    default_code = "application_error"


class UnauthorizedError(ApplicationError):
    """Login rejected: the password does not match the stored credential."""

    default_code = "unauthorized"


class ConfigError(ApplicationError):
    """``PASSLAB_*`` configuration could not be loaded.

    ``setting_name`` names the offending field or environment variable when
    one is known; it is mirrored into ``detail["setting"]``.
    """

    default_code = "config_error"

    def __init__(
        self,
        message: str,
        *,
        setting_name: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(
            message,
            detail={"setting": setting_name} if setting_name else None,
            cause=cause,
        )
        self.setting_name = setting_name


class MissingRequiredSettingError(ConfigError):
    """A settings field without a default has no environment variable."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is not set", setting_name=setting_name)


class InvalidSettingValueError(ConfigError):
    """A setting could not be coerced, or is outside its allowed range."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(f"{setting_name}={value!r}: {reason}", setting_name=setting_name)
        self.value = value
        self.reason = reason
        self.detail["reason"] = reason


__all__ = [
    "ApplicationError",
    "ConfigError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "UnauthorizedError",
]
