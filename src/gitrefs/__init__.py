from __future__ import annotations

from gitrefs.auth.credentials import AuthHandle, HttpAuth, SshKeyAuth, resolve_transport
from gitrefs.auth.ssh_vendor import HostKeyPolicy
from gitrefs.core.models import BranchesAndTags, RefSet, RemoteRef, RepoCredential, ResolutionRequest
from gitrefs.core.result import Failure, Outcome, Success
from gitrefs.errors import (
    EmptyRefAdvertisement,
    ErrorKind,
    GitRefsError,
    InvalidRequest,
    MissingCredentialField,
    RefListingFailed,
)
from gitrefs.runtime.client import (
    GitRefClient,
    list_branches_and_tags,
    resolve_commit_id,
    try_list_branches_and_tags,
    try_resolve_commit_id,
)
from gitrefs.runtime.config import ResolverConfig

__version__ = '1.0.0'

__all__ = [
    'AuthHandle',
    'BranchesAndTags',
    'EmptyRefAdvertisement',
    'ErrorKind',
    'Failure',
    'GitRefClient',
    'GitRefsError',
    'HostKeyPolicy',
    'HttpAuth',
    'InvalidRequest',
    'MissingCredentialField',
    'Outcome',
    'RefListingFailed',
    'RefSet',
    'RemoteRef',
    'RepoCredential',
    'ResolutionRequest',
    'ResolverConfig',
    'SshKeyAuth',
    'Success',
    'list_branches_and_tags',
    'resolve_commit_id',
    'resolve_transport',
    'try_list_branches_and_tags',
    'try_resolve_commit_id',
]
