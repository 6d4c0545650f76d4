from __future__ import annotations

from typing import Optional

from gitrefs.constants import BRANCH_PREFIX, TAG_PREFIX
from gitrefs.core.models import RefSet


def resolve_commit_id(ref_set: RefSet, original_reference: str) -> Optional[str]:
    """Map a branch name, tag name or literal object id to an object id.

    An entry matches when its name is ``refs/heads/<ref>`` or
    ``refs/tags/<ref>``, or when its object id equals *original_reference*.
    The first match in advertisement order wins; None when nothing matches.
    """
    branch = BRANCH_PREFIX + original_reference
    tag = TAG_PREFIX + original_reference
    for ref in ref_set:
        if ref.full_name in (branch, tag) or ref.object_id == original_reference:
            return ref.object_id
    return None
