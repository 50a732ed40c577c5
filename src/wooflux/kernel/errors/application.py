"""Application-layer errors – session and credential problems."""

from __future__ import annotations

from wooflux.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class UnauthorizedError(ApplicationError):
    """Missing, expired or rejected credentials."""

    default_code = "unauthorized"


__all__ = ["ApplicationError", "UnauthorizedError"]
