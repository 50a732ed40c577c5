"""Config – Settings base class and the wooflux runtime settings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from wooflux.config.errors import InvalidSettingValueError

STORAGE_BACKENDS = ("memory", "sqlalchemy")


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class WoofluxSettings(Settings):
    """Runtime settings, read from ``WOOFLUX_*`` environment variables."""

    _prefix: ClassVar[str] = "WOOFLUX"

    api_base_url: str = "https://public-api.wordpress.com/rest/v1.1/"
    request_timeout: float = 30.0
    user_agent: str = "wooflux/0.1.0"
    storage_backend: str = "memory"
    storage_url: str = "sqlite://"
    log_level: str = "INFO"
    log_json: bool = True

    def _validate(self) -> None:
        if self.request_timeout <= 0:
            raise InvalidSettingValueError(
                "request_timeout", self.request_timeout, "must be positive"
            )
        if self.storage_backend not in STORAGE_BACKENDS:
            raise InvalidSettingValueError(
                "storage_backend",
                self.storage_backend,
                f"expected one of {', '.join(STORAGE_BACKENDS)}",
            )
        if self.log_level.upper() not in logging.getLevelNamesMapping():
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")
        if not self.api_base_url.endswith("/"):
            self.api_base_url = f"{self.api_base_url}/"


__all__ = ["STORAGE_BACKENDS", "Settings", "WoofluxSettings"]
