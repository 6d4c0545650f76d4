"""Public surface for gitrefs.core.

Data model, outcome types and the Protocols that separate the resolution
logic from the Git protocol client:

    from gitrefs.core import RefSet, RepoCredential, LsRemoteProtocol, ...
"""

from gitrefs.core.interfaces.git import LsRemoteProtocol, RefListerProtocol
from gitrefs.core.models import (
    BranchesAndTags,
    RefSet,
    RemoteRef,
    RepoCredential,
    ResolutionRequest,
)
from gitrefs.core.result import Failure, Outcome, Success, capture

__all__ = [
    "BranchesAndTags",
    "RefSet",
    "RemoteRef",
    "RepoCredential",
    "ResolutionRequest",
    "Failure",
    "Outcome",
    "Success",
    "capture",
    "LsRemoteProtocol",
    "RefListerProtocol",
]
