from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates the ref naming and URL scheme constants to reduce
cross-module coupling.
"""

BRANCH_PREFIX: str = 'refs/heads/'
TAG_PREFIX: str = 'refs/tags/'

# Suffix dulwich appends to the peeled value of an annotated tag.
PEELED_SUFFIX: str = '^{}'

# Compared with str.startswith, so it also covers "https".
HTTP_URL_PREFIX: str = 'http'

DEFAULT_SSH_TIMEOUT: float = 30.0
