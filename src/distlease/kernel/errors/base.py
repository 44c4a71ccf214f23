"""Root error class for the distlease error hierarchy."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    ``code`` is a stable slug for log filtering; ``detail`` carries the lease
    key, setting name or store resource involved. The underlying store or
    parsing exception travels as ``__cause__`` (``raise ... from exc``).
    """

    default_code: str = "base_error"

    def __init__(self, message: str, *, detail: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = self.default_code
        self.detail: dict[str, Any] = detail or {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Flatten for ``logger.warning(..., **err.to_dict())``."""
        payload: dict[str, Any] = {"code": self.code, "message": self.message, **self.detail}
        if self.__cause__ is not None:
            payload["cause"] = repr(self.__cause__)
        return payload


__all__ = ["BaseError"]
