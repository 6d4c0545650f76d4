"""
adapters.ls_remote – dulwich-backed ``ls-remote`` behind LsRemoteProtocol.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from gitrefs.auth.credentials import AuthHandle
from gitrefs.constants import BRANCH_PREFIX, PEELED_SUFFIX, TAG_PREFIX
from gitrefs.core.interfaces.git import LsRemoteProtocol
from gitrefs.logging.helpers import get_logger, trace_io


class DulwichLsRemote(LsRemoteProtocol):
    """Fetch the ref advertisement of a remote with dulwich.

    The auth handle opens the dulwich client (HTTP or SSH), ``get_refs`` runs
    the advertisement exchange, and the result is narrowed to the requested
    namespaces. Peeled tag entries (``refs/tags/x^{}``) and refs without an
    object id are dropped. Nothing is fetched beyond the advertisement.
    """

    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger('ls_remote')

    def ls_remote(
        self,
        url: str,
        auth: AuthHandle,
        *,
        heads: bool = True,
        tags: bool = True,
    ) -> Optional[List[Tuple[str, str]]]:
        client, path = auth.open_client(url)
        trace_io(self._log, 'ls-remote', url=url, path=path, scheme=auth.scheme)
        result = client.get_refs(path)
        if result is None:
            return None

        prefixes = tuple(p for p, wanted in ((BRANCH_PREFIX, heads), (TAG_PREFIX, tags)) if wanted)
        pairs: List[Tuple[str, str]] = []
        for raw_name, raw_sha in result.refs.items():
            if raw_sha is None:
                continue
            name = raw_name.decode('utf-8')
            if name.endswith(PEELED_SUFFIX) or not name.startswith(prefixes):
                continue
            pairs.append((name, raw_sha.decode('ascii')))
        trace_io(self._log, 'ls-remote done', url=url, advertised=len(result.refs), kept=len(pairs))
        return pairs
