from __future__ import annotations

"""GitRefClient: the public entry point wiring auth, listing and resolution.

Flow for every call:
    request validation → resolve_transport (HTTP vs SSH by URL prefix)
    → RemoteRefLister.list_refs (one ls-remote round trip)
    → ref_resolver.resolve_commit_id  or  ref_enumerator.enumerate_refs
"""

from typing import Optional

from gitrefs.auth.credentials import AuthHandle, resolve_transport
from gitrefs.core.interfaces.git import LsRemoteProtocol
from gitrefs.core.models import BranchesAndTags, RefSet, RepoCredential, ResolutionRequest
from gitrefs.core.result import Outcome, capture
from gitrefs.discovery.ref_enumerator import enumerate_refs
from gitrefs.discovery.ref_resolver import resolve_commit_id as match_reference
from gitrefs.discovery.remote_refs import RemoteRefLister
from gitrefs.errors import InvalidRequest
from gitrefs.logging.helpers import get_logger
from gitrefs.runtime.config import ResolverConfig


class GitRefClient:
    """Resolve references of a single remote repository.

    Build it with ``GitRefClient(url, credential)`` to enumerate branches and
    tags, or with ``GitRefClient.for_reference(url, reference, credential)``
    to resolve a branch, tag or commit id. Inputs are validated immediately;
    the remote is contacted only by ``get_commit_id`` and
    ``get_branches_and_tags``.
    """

    def __init__(
        self,
        url: Optional[str],
        credential: Optional[RepoCredential],
        original_reference: Optional[str] = None,
        *,
        require_reference: bool = False,
        config: Optional[ResolverConfig] = None,
        ls_remote: Optional[LsRemoteProtocol] = None,
    ) -> None:
        self._config = config or ResolverConfig()
        self._log = self._config.logger or get_logger('client')
        try:
            self._request = ResolutionRequest.create(
                url, credential, original_reference, require_reference=require_reference
            )
        except InvalidRequest as exc:
            self._log.error('invalid resolution request: %s', exc)
            raise
        self._lister = RemoteRefLister(ls_remote, logger=self._config.logger)

    @classmethod
    def for_reference(
        cls,
        url: Optional[str],
        original_reference: Optional[str],
        credential: Optional[RepoCredential],
        **kwargs,
    ) -> 'GitRefClient':
        """Build a client that must resolve *original_reference*."""
        return cls(url, credential, original_reference, require_reference=True, **kwargs)

    @property
    def request(self) -> ResolutionRequest:
        return self._request

    def _auth(self) -> AuthHandle:
        cfg = self._config
        return resolve_transport(
            self._request.url,
            self._request.credential,
            host_key_policy=cfg.host_key_policy,
            known_hosts_file=cfg.known_hosts_file,
            ssh_timeout=cfg.ssh_timeout,
            logger=cfg.logger,
        )

    def fetch_refs(self) -> RefSet:
        """Return the heads and tags advertised by the remote."""
        req = self._request
        return self._lister.list_refs(req.url, self._auth(), reference=req.original_reference)

    def get_commit_id(self) -> Optional[str]:
        """Return the commit id the reference points to, or None when nothing matches."""
        req = self._request
        if not req.original_reference:
            self._log.error('no reference to resolve for %s', req.url)
            raise InvalidRequest('original reference can not be empty', context=req.log_context())

        commit_id = match_reference(self.fetch_refs(), req.original_reference)
        if commit_id is None:
            self._log.info(
                'no ref matches %r. url = %s, username = %s',
                req.original_reference, req.url, req.credential.username,
            )
        else:
            self._log.info('resolved %r to %s (%s)', req.original_reference, commit_id, req.url)
        return commit_id

    def get_branches_and_tags(self) -> BranchesAndTags:
        """Return the sorted branch and tag names of the remote."""
        result = enumerate_refs(self.fetch_refs(), logger=self._config.logger)
        self._log.info(
            '%s: %d branches, %d tags', self._request.url, len(result.branches), len(result.tags)
        )
        return result


def resolve_commit_id(
    url: str,
    original_reference: str,
    credential: RepoCredential,
    *,
    config: Optional[ResolverConfig] = None,
    ls_remote: Optional[LsRemoteProtocol] = None,
) -> Optional[str]:
    """Resolve a branch name, tag name or commit id on *url* to a commit id."""
    client = GitRefClient.for_reference(url, original_reference, credential, config=config, ls_remote=ls_remote)
    return client.get_commit_id()


def list_branches_and_tags(
    url: str,
    credential: RepoCredential,
    *,
    config: Optional[ResolverConfig] = None,
    ls_remote: Optional[LsRemoteProtocol] = None,
) -> BranchesAndTags:
    """List the branch and tag names advertised by *url*, sorted."""
    return GitRefClient(url, credential, config=config, ls_remote=ls_remote).get_branches_and_tags()


def try_resolve_commit_id(
    url: str,
    original_reference: str,
    credential: RepoCredential,
    **kwargs,
) -> 'Outcome[Optional[str]]':
    """Like resolve_commit_id, but returns Success/Failure instead of raising."""
    return capture(lambda: resolve_commit_id(url, original_reference, credential, **kwargs))


def try_list_branches_and_tags(
    url: str,
    credential: RepoCredential,
    **kwargs,
) -> 'Outcome[BranchesAndTags]':
    """Like list_branches_and_tags, but returns Success/Failure instead of raising."""
    return capture(lambda: list_branches_and_tags(url, credential, **kwargs))
