from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from gitrefs.constants import BRANCH_PREFIX, TAG_PREFIX
from gitrefs.errors import InvalidRequest


@dataclass(frozen=True)
class RepoCredential:
    """Credential record for one remote: username plus password or SSH key."""
    username: str
    password: Optional[str] = field(default=None, repr=False)
    ssh_key: Optional[str] = field(default=None, repr=False)
    ssh_passphrase: Optional[str] = field(default=None, repr=False)


@dataclass(frozen=True)
class RemoteRef:
    full_name: str
    object_id: str

    @property
    def is_branch(self) -> bool:
        return self.full_name.startswith(BRANCH_PREFIX)

    @property
    def is_tag(self) -> bool:
        return self.full_name.startswith(TAG_PREFIX)

    @property
    def short_name(self) -> Optional[str]:
        """Name without the heads/tags prefix, or None for any other ref."""
        if self.is_branch:
            return self.full_name[len(BRANCH_PREFIX):]
        if self.is_tag:
            return self.full_name[len(TAG_PREFIX):]
        return None


@dataclass(frozen=True)
class RefSet:
    """Ordered ref advertisement, unique by full name.

    Iteration follows the order the remote advertised the refs in.
    """
    refs: Tuple[RemoteRef, ...] = ()

    def __post_init__(self) -> None:
        names = [r.full_name for r in self.refs]
        if len(names) != len(set(names)):
            raise ValueError('RefSet entries must be unique by full_name')

    @classmethod
    def from_pairs(cls, pairs: Union[Iterable[Tuple[str, str]], Dict[str, str]]) -> 'RefSet':
        """Build a RefSet from (full_name, object_id) pairs, keeping the first of duplicates."""
        items = pairs.items() if isinstance(pairs, dict) else pairs
        seen: Dict[str, RemoteRef] = {}
        for name, oid in items:
            if name not in seen:
                seen[name] = RemoteRef(full_name=name, object_id=oid)
        return cls(refs=tuple(seen.values()))

    def __iter__(self) -> Iterator[RemoteRef]:
        return iter(self.refs)

    def __len__(self) -> int:
        return len(self.refs)

    def __bool__(self) -> bool:
        return bool(self.refs)

    def names(self) -> List[str]:
        return [r.full_name for r in self.refs]


@dataclass(frozen=True)
class ResolutionRequest:
    """Validated input of one resolution or enumeration call."""
    url: str
    credential: RepoCredential
    original_reference: Optional[str] = None

    @classmethod
    def create(
        cls,
        url: Optional[str],
        credential: Optional[RepoCredential],
        original_reference: Optional[str] = None,
        *,
        require_reference: bool = False,
    ) -> 'ResolutionRequest':
        """Validate the inputs and return a request.

        Raises:
            InvalidRequest: url, credential or username is empty, or the
                reference is empty while ``require_reference`` is set.
        """
        username = credential.username if credential is not None else None
        context = {'url': url, 'reference': original_reference, 'username': username}
        if not url or credential is None or not username:
            raise InvalidRequest('url, credential and username can not be empty', context=context)
        if require_reference and not original_reference:
            raise InvalidRequest('original reference can not be empty', context=context)
        return cls(url=url, credential=credential, original_reference=original_reference)

    def log_context(self) -> Dict[str, str]:
        """Diagnostic fields safe to log (no secrets)."""
        ctx = {'url': self.url, 'username': self.credential.username}
        if self.original_reference:
            ctx['reference'] = self.original_reference
        return ctx


@dataclass(frozen=True)
class BranchesAndTags:
    branches: Tuple[str, ...] = ()
    tags: Tuple[str, ...] = ()

    def as_dict(self) -> Dict[str, List[str]]:
        return {'branches': list(self.branches), 'tags': list(self.tags)}
