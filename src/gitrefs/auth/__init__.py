"""
gitrefs.auth – Credential resolution and SSH transport setup.

Modules
-------
credentials.py → HttpAuth / SshKeyAuth handles and resolve_transport()
ssh_vendor.py  → paramiko-backed dulwich SSHVendor and HostKeyPolicy
"""

from .credentials import AuthHandle, HttpAuth, SshKeyAuth, is_http_url, resolve_transport
from .ssh_vendor import HostKeyPolicy, PrivateKeySSHVendor, load_private_key

__all__ = [
    "AuthHandle",
    "HttpAuth",
    "SshKeyAuth",
    "HostKeyPolicy",
    "PrivateKeySSHVendor",
    "is_http_url",
    "load_private_key",
    "resolve_transport",
]
