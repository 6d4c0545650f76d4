from .client import (
    GitRefClient,
    list_branches_and_tags,
    resolve_commit_id,
    try_list_branches_and_tags,
    try_resolve_commit_id,
)
from .config import ResolverConfig

__all__ = [
    'GitRefClient',
    'ResolverConfig',
    'list_branches_and_tags',
    'resolve_commit_id',
    'try_list_branches_and_tags',
    'try_resolve_commit_id',
]
