"""MoneroRequestError — base exception class for all monero-request errors."""

from __future__ import annotations

from typing import Self


class MoneroRequestError(Exception):
    """Base error for all payment request operations.

    Pre-defined instances in :mod:`monero_request.errors.definitions` act as
    templates; call one to get a fresh exception to raise, e.g.
    ``raise ErrBadUrl() from exc``.

    Attributes:
        message: Human-readable error description.
        code: Machine-readable error code string.
    """

    def __init__(self, message: str, *, code: str = "monero-request-error") -> None:
        super().__init__(message)
        self.message = message
        self.code = code

    def __call__(self) -> Self:
        """Return a new exception with the same class, message and code."""
        return type(self)(self.message, code=self.code)


class ValidationError(MoneroRequestError):
    """A payment request field failed validation."""

    def __init__(self, message: str, *, code: str = "validation-error") -> None:
        super().__init__(message, code=code)


class CodecError(MoneroRequestError):
    """An envelope could not be produced or parsed."""

    def __init__(self, message: str, *, code: str = "codec-error") -> None:
        super().__init__(message, code=code)
