"""Typed errors raised by gitrefs.

Every error carries an :class:`ErrorKind`, a numeric ``code`` compatible with
the historical status codes, and a ``context`` mapping with the diagnostic
fields (url, reference, username). Secrets never enter ``context``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Mapping, Optional


class ErrorKind(Enum):
    """Failure kinds, valued by their historical status code."""

    MISSING_CREDENTIAL_FIELD = 1
    INVALID_REQUEST = 2
    EMPTY_REF_ADVERTISEMENT = 3
    REF_LISTING_FAILED = 4

    @property
    def code(self) -> int:
        return int(self.value)


class GitRefsError(Exception):
    """Base class for every error surfaced by gitrefs."""

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        *,
        context: Optional[Mapping[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.context: Dict[str, Any] = {k: v for k, v in (context or {}).items() if v is not None}
        self.cause = cause

    @property
    def code(self) -> int:
        return self.kind.code

    def __str__(self) -> str:
        if not self.context:
            return self.message
        ctx = ', '.join(f'{k}={v}' for k, v in self.context.items())
        return f'{self.message} ({ctx})'


class InvalidRequest(GitRefsError):
    """url, credential, username or a required reference is empty."""

    kind = ErrorKind.INVALID_REQUEST


class MissingCredentialField(GitRefsError):
    """The selected transport needs a credential field that is empty."""

    kind = ErrorKind.MISSING_CREDENTIAL_FIELD


class EmptyRefAdvertisement(GitRefsError):
    """The remote answered but advertised no branch or tag."""

    kind = ErrorKind.EMPTY_REF_ADVERTISEMENT


class RefListingFailed(GitRefsError):
    """The ls-remote exchange itself failed; ``cause`` holds the original error."""

    kind = ErrorKind.REF_LISTING_FAILED


ERRORS_BY_KIND: Dict[ErrorKind, type] = {
    ErrorKind.INVALID_REQUEST: InvalidRequest,
    ErrorKind.MISSING_CREDENTIAL_FIELD: MissingCredentialField,
    ErrorKind.EMPTY_REF_ADVERTISEMENT: EmptyRefAdvertisement,
    ErrorKind.REF_LISTING_FAILED: RefListingFailed,
}


def error_for(
    kind: ErrorKind,
    message: str,
    *,
    context: Optional[Mapping[str, Any]] = None,
    cause: Optional[BaseException] = None,
) -> GitRefsError:
    """Build the exception class registered for *kind*."""
    return ERRORS_BY_KIND[kind](message, context=context, cause=cause)
