from __future__ import annotations

"""Remote ref listing with failure classification.

One ``ls-remote`` attempt per call, no retries. Collaborator errors become
RefListingFailed (cause chained); an empty answer becomes
EmptyRefAdvertisement.
"""

import logging
from typing import Optional

from gitrefs.auth.credentials import AuthHandle
from gitrefs.core.interfaces.git import LsRemoteProtocol, RefListerProtocol
from gitrefs.core.models import RefSet
from gitrefs.errors import EmptyRefAdvertisement, RefListingFailed
from gitrefs.logging.helpers import get_logger


class RemoteRefLister(RefListerProtocol):
    def __init__(
        self,
        collaborator: Optional[LsRemoteProtocol] = None,
        *,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        if collaborator is None:
            from gitrefs.adapters.ls_remote import DulwichLsRemote
            collaborator = DulwichLsRemote()
        self._collab = collaborator
        self._log = logger or get_logger('refs')

    def list_refs(self, url: str, auth: AuthHandle, *, reference: Optional[str] = None) -> RefSet:
        """Return the heads and tags advertised by *url*.

        Raises:
            RefListingFailed: the ls-remote exchange raised.
            EmptyRefAdvertisement: the remote returned no heads or tags.
        """
        context = {'url': url, 'reference': reference, 'username': auth.username}
        try:
            pairs = self._collab.ls_remote(url, auth, heads=True, tags=True)
        except Exception as exc:
            self._log.error(
                'listing refs failed. url = %s, reference = %s, username = %s: %s',
                url, reference, auth.username, exc,
            )
            raise RefListingFailed(f'could not list refs of {url}: {exc}', context=context, cause=exc) from exc

        ref_set = RefSet.from_pairs(pairs) if pairs is not None else RefSet()
        if not ref_set:
            self._log.info(
                'remote advertised no refs. url = %s, reference = %s, username = %s',
                url, reference, auth.username,
            )
            raise EmptyRefAdvertisement(f'{url} advertised no branches or tags', context=context)
        self._log.debug('%d refs advertised by %s', len(ref_set), url)
        return ref_set
