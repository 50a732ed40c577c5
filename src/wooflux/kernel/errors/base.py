"""Root error class for the wooflux error hierarchy."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    Stores hand these to callers as ``Err(error)`` through completion
    callbacks, so every error says whether dispatching the same action again
    may succeed (``retryable``) next to its ``code`` slug and ``detail``.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Extra context such as ids or HTTP status, safe to log.
        cause: Original exception (httpx, SQLAlchemy, decoding) behind this one.
    """

    default_code: str = "wooflux_error"
    retryable: bool = False

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Fields for a structlog event or a UI error banner."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "retryable": self.retryable,
        }
        if self.detail:
            payload["detail"] = dict(self.detail)
        if self.cause is not None:
            payload["cause"] = type(self.cause).__name__
        return payload


def describe_error(exc: BaseException) -> dict[str, Any]:
    """Loggable summary of *exc*; foreign exceptions are reported as not retryable."""
    if isinstance(exc, BaseError):
        return exc.to_dict()
    return {
        "code": "unexpected_error",
        "message": str(exc),
        "retryable": False,
        "type": type(exc).__name__,
    }


__all__ = ["BaseError", "describe_error"]
