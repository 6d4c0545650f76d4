from __future__ import annotations

import logging
from typing import List, Optional

from gitrefs.core.models import BranchesAndTags, RefSet
from gitrefs.logging.helpers import get_logger


def enumerate_refs(ref_set: RefSet, *, logger: Optional[logging.Logger] = None) -> BranchesAndTags:
    """Split a RefSet into sorted branch and tag short names.

    Refs outside refs/heads/ and refs/tags/ are skipped.
    """
    log = logger or get_logger('refs')
    branches: List[str] = []
    tags: List[str] = []
    for ref in ref_set:
        if ref.is_branch:
            branches.append(ref.short_name)
        elif ref.is_tag:
            tags.append(ref.short_name)
        else:
            log.debug('skipping %s: neither a branch nor a tag', ref.full_name)
    return BranchesAndTags(branches=tuple(sorted(branches)), tags=tuple(sorted(tags)))
