from __future__ import annotations

"""paramiko-backed SSH vendor for dulwich, keyed by in-memory private key text.

dulwich talks to SSH remotes through an ``SSHVendor``: ``run_command`` opens a
channel running ``git-upload-pack`` and returns a socket-like object with
``read``/``write``/``close``/``can_read``. This vendor authenticates with the
private key material handed over by the caller (never a key file on disk) and
applies an explicit host-key policy to the one client it opens.
"""

import io
import logging
from enum import Enum
from pathlib import Path
from typing import List, Optional

import paramiko
from dulwich.client import SSHVendor

from gitrefs.constants import DEFAULT_SSH_TIMEOUT
from gitrefs.logging.helpers import get_logger, trace_io


class HostKeyPolicy(Enum):
    """How to treat the remote's SSH host key.

    ACCEPT_ALL mirrors ``StrictHostKeyChecking=no``: any host key is accepted
    and nothing is persisted. Deployments that can provision known_hosts
    should switch to KNOWN_HOSTS.
    """

    ACCEPT_ALL = 'accept-all'
    KNOWN_HOSTS = 'known-hosts'


def _key_classes() -> List[type]:
    classes: List[type] = [paramiko.RSAKey, paramiko.ECDSAKey, paramiko.Ed25519Key]
    # DSSKey was dropped from recent paramiko releases.
    dss = getattr(paramiko, 'DSSKey', None)
    if dss is not None:
        classes.append(dss)
    return classes


def load_private_key(private_key: str, passphrase: Optional[str] = None) -> paramiko.PKey:
    """Parse PEM/OpenSSH private key text, trying each supported key type.

    Raises:
        paramiko.SSHException: the text is not a key paramiko understands, or
            the passphrase is missing or wrong.
    """
    last_exc: Optional[Exception] = None
    for key_cls in _key_classes():
        try:
            return key_cls.from_private_key(io.StringIO(private_key), password=passphrase or None)
        except paramiko.PasswordRequiredException:
            raise
        except (paramiko.SSHException, ValueError) as exc:
            last_exc = exc
    raise paramiko.SSHException(f'unsupported or invalid private key: {last_exc}')


class ParamikoChannelWrapper:
    """Socket-like view of a paramiko exec channel, as dulwich expects."""

    def __init__(self, client: paramiko.SSHClient, channel: paramiko.Channel) -> None:
        self.client = client
        self.channel = channel
        self.channel.setblocking(True)
        self.stderr = self.channel.makefile_stderr('rb')

    def can_read(self) -> bool:
        return self.channel.recv_ready()

    def write(self, data: bytes) -> None:
        self.channel.sendall(data)

    def read(self, n: Optional[int] = None) -> bytes:
        if n is None:
            chunks = []
            while True:
                data = self.channel.recv(65536)
                if not data:
                    return b''.join(chunks)
                chunks.append(data)

        buf = b''
        while len(buf) < n:
            data = self.channel.recv(n - len(buf))
            if not data:
                break
            buf += data
        return buf

    def close(self) -> None:
        self.channel.close()
        self.client.close()


class PrivateKeySSHVendor(SSHVendor):
    """SSHVendor that logs in with a private key held in memory."""

    def __init__(
        self,
        private_key: str,
        passphrase: Optional[str] = None,
        *,
        host_key_policy: HostKeyPolicy = HostKeyPolicy.ACCEPT_ALL,
        known_hosts_file: Optional[Path] = None,
        timeout: Optional[float] = DEFAULT_SSH_TIMEOUT,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._private_key = private_key
        self._passphrase = passphrase
        self._policy = host_key_policy
        self._known_hosts = known_hosts_file
        self._timeout = timeout
        self._log = logger or get_logger('ssh')

    def _apply_host_key_policy(self, client: paramiko.SSHClient) -> None:
        if self._policy is HostKeyPolicy.KNOWN_HOSTS:
            client.load_system_host_keys()
            if self._known_hosts is not None:
                client.load_host_keys(str(self._known_hosts))
            client.set_missing_host_key_policy(paramiko.RejectPolicy())
        else:
            client.set_missing_host_key_policy(paramiko.AutoAddPolicy())

    def run_command(  # type: ignore[override]
        self,
        host: str,
        command: bytes,
        username: Optional[str] = None,
        port: Optional[int] = None,
        password: Optional[str] = None,
        key_filename: Optional[str] = None,
        ssh_command: Optional[str] = None,
        protocol_version: Optional[int] = None,
        **kwargs,
    ) -> ParamikoChannelWrapper:
        """Connect to *host* and start *command* on a fresh exec channel."""
        client = paramiko.SSHClient()
        try:
            pkey = load_private_key(self._private_key, self._passphrase)
            self._apply_host_key_policy(client)
            trace_io(self._log, 'ssh connect', host=host, port=port or 22, username=username,
                     policy=self._policy.value)
            client.connect(
                hostname=host,
                port=port or 22,
                username=username,
                pkey=pkey,
                timeout=self._timeout,
                allow_agent=False,
                look_for_keys=False,
            )
            channel = client.get_transport().open_session()
            if protocol_version == 2:
                channel.set_environment_variable(name='GIT_PROTOCOL', value='version=2')
            channel.exec_command(command)
        except Exception:
            client.close()
            raise
        return ParamikoChannelWrapper(client, channel)
