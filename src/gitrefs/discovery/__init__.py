from .ref_enumerator import enumerate_refs
from .ref_resolver import resolve_commit_id
from .remote_refs import RemoteRefLister

__all__ = [
    'RemoteRefLister',
    'enumerate_refs',
    'resolve_commit_id',
]
