from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional, Protocol, Tuple, runtime_checkable

from gitrefs.core.models import RefSet

if TYPE_CHECKING:  # pragma: no cover - typing only
    from gitrefs.auth.credentials import AuthHandle


@runtime_checkable
class LsRemoteProtocol(Protocol):
    """Contract for the Git protocol client that performs ``ls-remote``.

    Returns (full ref name, object id) pairs, or None when the remote
    answered without a ref list. Transport and protocol failures raise.
    """

    def ls_remote(
        self,
        url: str,
        auth: 'AuthHandle',
        *,
        heads: bool = True,
        tags: bool = True,
    ) -> Optional[Iterable[Tuple[str, str]]]: ...


@runtime_checkable
class RefListerProtocol(Protocol):
    """Lists the heads and tags of a remote as a RefSet."""

    def list_refs(self, url: str, auth: 'AuthHandle') -> RefSet: ...
