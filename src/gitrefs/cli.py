from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import NoReturn, Optional, Sequence

from gitrefs.auth.ssh_vendor import HostKeyPolicy
from gitrefs.core.models import RepoCredential
from gitrefs.errors import GitRefsError
from gitrefs.logging.factory import DefaultLoggerFactory
from gitrefs.logging.helpers import get_logger
from gitrefs.runtime.client import GitRefClient
from gitrefs.runtime.config import ResolverConfig

logger = get_logger('cli')

EXIT_NOT_FOUND = 1
EXIT_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog='gitrefs',
        description='gitrefs – resolve branch/tag names of a remote Git repository without cloning it',
    )
    p.add_argument('--json-logs', action='store_true', help='Emit log records as JSON lines.')
    p.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging.')

    auth = argparse.ArgumentParser(add_help=False)
    g = auth.add_argument_group('Credentials')
    g.add_argument('url', help='Remote URL (http(s)://… uses password auth, anything else SSH).')
    g.add_argument('-u', '--username', required=True, help='Remote username.')
    g.add_argument(
        '-p', '--password',
        default=None,
        help='Password or token for HTTP(S) remotes (default: $GITREFS_PASSWORD).',
    )
    g.add_argument('--ssh-key', metavar='FILE', type=Path, help='Private key file for SSH remotes.')
    g.add_argument(
        '--ssh-passphrase',
        default=None,
        help='Passphrase of the private key (default: $GITREFS_SSH_PASSPHRASE).',
    )
    h = auth.add_argument_group('Host keys')
    h.add_argument(
        '--strict-host-keys',
        action='store_true',
        help='Verify SSH host keys against known_hosts instead of accepting any key.',
    )
    h.add_argument('--known-hosts', metavar='FILE', type=Path, help='Extra known_hosts file.')

    sub = p.add_subparsers(dest='command', required=True)
    r = sub.add_parser('resolve', parents=[auth], help='Print the commit id of a branch, tag or commit id.')
    r.add_argument('reference', help='Branch name, tag name or commit id.')
    sub.add_parser('list', parents=[auth], help='Print branches and tags as JSON.')
    return p


def _credential(ns: argparse.Namespace) -> RepoCredential:
    ssh_key = ns.ssh_key.read_text(encoding='utf-8') if ns.ssh_key else None
    return RepoCredential(
        username=ns.username,
        password=ns.password or os.getenv('GITREFS_PASSWORD'),
        ssh_key=ssh_key,
        ssh_passphrase=ns.ssh_passphrase or os.getenv('GITREFS_SSH_PASSPHRASE'),
    )


def _config(ns: argparse.Namespace) -> ResolverConfig:
    overrides = {}
    if ns.strict_host_keys:
        overrides['host_key_policy'] = HostKeyPolicy.KNOWN_HOSTS
    if ns.known_hosts:
        overrides['known_hosts_file'] = ns.known_hosts
    return ResolverConfig.from_env(**overrides)


def run(argv: Sequence[str], out=None) -> int:
    """Execute one gitrefs command and return its exit code."""
    global logger
    out = out or sys.stdout
    ns = _build_parser().parse_args(list(argv))

    factory = DefaultLoggerFactory.from_env(
        json_logs=True if ns.json_logs else None,
        level=logging.DEBUG if ns.verbose else None,
    )
    logger = factory.get_logger('cli')

    credential = _credential(ns)
    config = _config(ns)
    try:
        if ns.command == 'resolve':
            client = GitRefClient.for_reference(ns.url, ns.reference, credential, config=config)
            commit_id = client.get_commit_id()
            if commit_id is None:
                logger.error('%s: no branch, tag or commit matches %r', ns.url, ns.reference)
                return EXIT_NOT_FOUND
            print(commit_id, file=out)
        else:
            result = GitRefClient(ns.url, credential, config=config).get_branches_and_tags()
            print(json.dumps(result.as_dict(), indent=2), file=out)
    except GitRefsError as exc:
        logger.error('%s [%s]', exc, exc.kind.name)
        return EXIT_ERROR
    return 0


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for `python -m gitrefs`."""
    try:
        raise SystemExit(run(sys.argv[1:] if argv is None else argv))
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
