from __future__ import annotations

"""Credential resolution: pick the auth handle for a remote URL.

``resolve_transport`` inspects only the URL prefix. HTTP(S) URLs get an
:class:`HttpAuth` (username + password or token); every other URL is treated
as SSH and gets an :class:`SshKeyAuth` (username + private key + optional
passphrase). Building a handle never touches the network.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple, Union

from dulwich.client import GitClient, SSHGitClient, get_transport_and_path

from gitrefs.auth.ssh_vendor import HostKeyPolicy, PrivateKeySSHVendor
from gitrefs.constants import DEFAULT_SSH_TIMEOUT, HTTP_URL_PREFIX
from gitrefs.core.models import RepoCredential
from gitrefs.errors import MissingCredentialField
from gitrefs.logging.helpers import get_logger


@dataclass(frozen=True)
class HttpAuth:
    """Password (or token) authentication for http/https remotes."""
    username: str
    password: str = field(repr=False)
    scheme: str = field(default='http', init=False)

    def open_client(self, url: str) -> Tuple[GitClient, str]:
        return get_transport_and_path(url, username=self.username, password=self.password)


@dataclass(frozen=True)
class SshKeyAuth:
    """Private-key authentication for SSH remotes."""
    username: str
    private_key: str = field(repr=False)
    passphrase: Optional[str] = field(default=None, repr=False)
    host_key_policy: HostKeyPolicy = HostKeyPolicy.ACCEPT_ALL
    known_hosts_file: Optional[Path] = None
    timeout: Optional[float] = DEFAULT_SSH_TIMEOUT
    scheme: str = field(default='ssh', init=False)

    def vendor(self, logger: Optional[logging.Logger] = None) -> PrivateKeySSHVendor:
        return PrivateKeySSHVendor(
            self.private_key,
            self.passphrase,
            host_key_policy=self.host_key_policy,
            known_hosts_file=self.known_hosts_file,
            timeout=self.timeout,
            logger=logger,
        )

    def open_client(self, url: str) -> Tuple[GitClient, str]:
        client, path = get_transport_and_path(url)
        if isinstance(client, SSHGitClient):
            # A user written in the URL (git@host) is the login user.
            if client.username is None:
                client.username = self.username
            client.ssh_vendor = self.vendor()
        else:
            get_logger('auth').warning(
                '⚠  %s is not an SSH remote; ssh key for %s is not used', url, self.username
            )
        return client, path


AuthHandle = Union[HttpAuth, SshKeyAuth]


def is_http_url(url: str) -> bool:
    return url.startswith(HTTP_URL_PREFIX)


def resolve_transport(
    url: str,
    credential: RepoCredential,
    *,
    host_key_policy: HostKeyPolicy = HostKeyPolicy.ACCEPT_ALL,
    known_hosts_file: Optional[Path] = None,
    ssh_timeout: Optional[float] = DEFAULT_SSH_TIMEOUT,
    logger: Optional[logging.Logger] = None,
) -> AuthHandle:
    """Return the auth handle matching the scheme of *url*.

    Raises:
        MissingCredentialField: password is empty for an HTTP(S) URL, or the
            SSH key is empty for any other URL.
    """
    log = logger or get_logger('auth')
    context = {'url': url, 'username': credential.username}

    if is_http_url(url):
        if not credential.password:
            log.error('password can not be empty for %s (username=%s)', url, credential.username)
            raise MissingCredentialField('password can not be empty', context=context)
        return HttpAuth(username=credential.username, password=credential.password)

    if not credential.ssh_key:
        log.error('ssh key can not be empty for %s (username=%s)', url, credential.username)
        raise MissingCredentialField('ssh key can not be empty', context=context)
    if host_key_policy is HostKeyPolicy.ACCEPT_ALL:
        log.debug('host key verification disabled for %s', url)
    return SshKeyAuth(
        username=credential.username,
        private_key=credential.ssh_key,
        passphrase=credential.ssh_passphrase or None,
        host_key_policy=host_key_policy,
        known_hosts_file=known_hosts_file,
        timeout=ssh_timeout,
    )
