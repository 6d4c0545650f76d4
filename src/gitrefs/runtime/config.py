from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from gitrefs.auth.ssh_vendor import HostKeyPolicy
from gitrefs.constants import DEFAULT_SSH_TIMEOUT


@dataclass(frozen=True)
class ResolverConfig:
    """Immutable per-call settings for GitRefClient.

    ``host_key_policy`` defaults to ACCEPT_ALL because the usual deployment
    cannot pre-populate known_hosts. Set KNOWN_HOSTS (optionally with
    ``known_hosts_file``) to verify SSH host keys.
    """
    host_key_policy: HostKeyPolicy = HostKeyPolicy.ACCEPT_ALL
    known_hosts_file: Optional[Path] = None
    ssh_timeout: Optional[float] = DEFAULT_SSH_TIMEOUT
    logger: Optional[logging.Logger] = None

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None, **overrides) -> 'ResolverConfig':
        """Build a config from GITREFS_* variables; keyword overrides win.

        GITREFS_STRICT_HOST_KEYS=1   verify host keys against known_hosts
        GITREFS_KNOWN_HOSTS=FILE     extra known_hosts file
        GITREFS_SSH_TIMEOUT=SECONDS  SSH connect timeout ("0" or "" disables)
        """
        env = os.environ if env is None else env
        values = {}
        if env.get('GITREFS_STRICT_HOST_KEYS') == '1':
            values['host_key_policy'] = HostKeyPolicy.KNOWN_HOSTS
        if env.get('GITREFS_KNOWN_HOSTS'):
            values['known_hosts_file'] = Path(env['GITREFS_KNOWN_HOSTS']).expanduser()
        if 'GITREFS_SSH_TIMEOUT' in env:
            raw = env['GITREFS_SSH_TIMEOUT'].strip()
            try:
                timeout = float(raw) if raw else 0.0
            except ValueError:
                raise ValueError(f'GITREFS_SSH_TIMEOUT must be a number of seconds, got {raw!r}') from None
            values['ssh_timeout'] = timeout if timeout > 0 else None
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
