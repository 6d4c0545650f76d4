from __future__ import annotations

import unittest
from pathlib import Path
from unittest.mock import patch

from fakes import SHA_DEV, SHA_MAIN, SHA_V1, FakeLsRemote

import gitrefs
from gitrefs import (
    BranchesAndTags,
    EmptyRefAdvertisement,
    ErrorKind,
    Failure,
    GitRefClient,
    HostKeyPolicy,
    HttpAuth,
    InvalidRequest,
    MissingCredentialField,
    RefListingFailed,
    RepoCredential,
    ResolverConfig,
    SshKeyAuth,
    Success,
)

HTTPS_URL = 'https://git.example.com/org/repo.git'
SSH_URL = 'git@git.example.com:org/repo.git'
CRED = RepoCredential(username='dev', password='s3cret', ssh_key='KEY')
ADVERTISED = [
    ('refs/heads/main', SHA_MAIN),
    ('refs/heads/dev', SHA_DEV),
    ('refs/tags/v1', SHA_V1),
]


# --------------------------------------------------------------------------- #
#  Request validation                                                         #
# --------------------------------------------------------------------------- #
class ValidationTests(unittest.TestCase):
    def test_invalid_inputs_fail_before_network(self) -> None:
        cases = [
            ('', 'main', CRED),
            (None, 'main', CRED),
            (HTTPS_URL, 'main', None),
            (HTTPS_URL, 'main', RepoCredential(username='')),
            (HTTPS_URL, '', CRED),
            (HTTPS_URL, None, CRED),
        ]
        for url, ref, cred in cases:
            fake = FakeLsRemote(ADVERTISED)
            with self.subTest(url=url, ref=ref, cred=cred):
                with self.assertRaises(InvalidRequest) as cm:
                    gitrefs.resolve_commit_id(url, ref, cred, ls_remote=fake)
                self.assertEqual(cm.exception.kind, ErrorKind.INVALID_REQUEST)
                self.assertEqual(fake.calls, [])

    def test_listing_does_not_need_a_reference(self) -> None:
        fake = FakeLsRemote(ADVERTISED)
        client = GitRefClient(HTTPS_URL, CRED, ls_remote=fake)
        self.assertIsNone(client.request.original_reference)
        with self.assertRaises(InvalidRequest):
            client.get_commit_id()
        self.assertEqual(fake.calls, [])

    def test_listing_validates_url_and_username(self) -> None:
        fake = FakeLsRemote(ADVERTISED)
        for url, cred in (('', CRED), (HTTPS_URL, None), (HTTPS_URL, RepoCredential(username=''))):
            with self.assertRaises(InvalidRequest):
                gitrefs.list_branches_and_tags(url, cred, ls_remote=fake)
        self.assertEqual(fake.calls, [])

    def test_missing_password_fails_before_network(self) -> None:
        fake = FakeLsRemote(ADVERTISED)
        cred = RepoCredential(username='dev', ssh_key='KEY')
        with self.assertRaises(MissingCredentialField):
            gitrefs.resolve_commit_id(HTTPS_URL, 'main', cred, ls_remote=fake)
        self.assertEqual(fake.calls, [])

    def test_missing_ssh_key_fails_before_network(self) -> None:
        fake = FakeLsRemote(ADVERTISED)
        cred = RepoCredential(username='dev', password='pw')
        with self.assertRaises(MissingCredentialField):
            gitrefs.list_branches_and_tags(SSH_URL, cred, ls_remote=fake)
        self.assertEqual(fake.calls, [])


# --------------------------------------------------------------------------- #
#  Resolution                                                                 #
# --------------------------------------------------------------------------- #
class ResolveTests(unittest.TestCase):
    def test_branch_tag_and_hash(self) -> None:
        fake = FakeLsRemote(ADVERTISED)
        self.assertEqual(gitrefs.resolve_commit_id(HTTPS_URL, 'main', CRED, ls_remote=fake), SHA_MAIN)
        self.assertEqual(gitrefs.resolve_commit_id(HTTPS_URL, 'v1', CRED, ls_remote=fake), SHA_V1)
        self.assertEqual(gitrefs.resolve_commit_id(HTTPS_URL, SHA_DEV, CRED, ls_remote=fake), SHA_DEV)

    def test_not_found_is_none(self) -> None:
        fake = FakeLsRemote(ADVERTISED)
        self.assertIsNone(gitrefs.resolve_commit_id(HTTPS_URL, 'ghost', CRED, ls_remote=fake))

    def test_idempotent(self) -> None:
        fake = FakeLsRemote(ADVERTISED)
        client = GitRefClient.for_reference(HTTPS_URL, 'dev', CRED, ls_remote=fake)
        self.assertEqual(client.get_commit_id(), client.get_commit_id())
        self.assertEqual(len(fake.calls), 2)

    def test_auth_variant_follows_url(self) -> None:
        fake = FakeLsRemote(ADVERTISED)
        gitrefs.resolve_commit_id(HTTPS_URL, 'main', CRED, ls_remote=fake)
        gitrefs.resolve_commit_id(SSH_URL, 'main', CRED, ls_remote=fake)
        self.assertIsInstance(fake.calls[0]['auth'], HttpAuth)
        self.assertIsInstance(fake.calls[1]['auth'], SshKeyAuth)

    def test_config_reaches_ssh_handle(self) -> None:
        fake = FakeLsRemote(ADVERTISED)
        cfg = ResolverConfig(host_key_policy=HostKeyPolicy.KNOWN_HOSTS, known_hosts_file=Path('/kh'), ssh_timeout=3)
        gitrefs.resolve_commit_id(SSH_URL, 'main', CRED, config=cfg, ls_remote=fake)
        auth = fake.calls[0]['auth']
        self.assertIs(auth.host_key_policy, HostKeyPolicy.KNOWN_HOSTS)
        self.assertEqual(auth.known_hosts_file, Path('/kh'))
        self.assertEqual(auth.timeout, 3)

    def test_empty_advertisement(self) -> None:
        for pairs in (None, []):
            with self.assertRaises(EmptyRefAdvertisement):
                gitrefs.resolve_commit_id(HTTPS_URL, 'main', CRED, ls_remote=FakeLsRemote(pairs))

    def test_listing_failure_keeps_cause(self) -> None:
        boom = ConnectionRefusedError('refused')
        with self.assertRaises(RefListingFailed) as cm:
            gitrefs.resolve_commit_id(HTTPS_URL, 'main', CRED, ls_remote=FakeLsRemote(error=boom))
        self.assertIs(cm.exception.cause, boom)
        self.assertEqual(cm.exception.context['reference'], 'main')
        self.assertEqual(cm.exception.context['username'], 'dev')

    def test_default_collaborator_is_dulwich(self) -> None:
        with patch('gitrefs.adapters.ls_remote.DulwichLsRemote.ls_remote', return_value=ADVERTISED) as ls:
            self.assertEqual(gitrefs.resolve_commit_id(HTTPS_URL, 'main', CRED), SHA_MAIN)
        ls.assert_called_once()


# --------------------------------------------------------------------------- #
#  Enumeration                                                                #
# --------------------------------------------------------------------------- #
class ListTests(unittest.TestCase):
    def test_branches_and_tags(self) -> None:
        result = gitrefs.list_branches_and_tags(HTTPS_URL, CRED, ls_remote=FakeLsRemote(ADVERTISED))
        self.assertEqual(result, BranchesAndTags(branches=('dev', 'main'), tags=('v1',)))

    def test_empty_advertisement(self) -> None:
        with self.assertRaises(EmptyRefAdvertisement):
            gitrefs.list_branches_and_tags(SSH_URL, CRED, ls_remote=FakeLsRemote(None))


# --------------------------------------------------------------------------- #
#  Outcome variants                                                           #
# --------------------------------------------------------------------------- #
class OutcomeTests(unittest.TestCase):
    def test_success(self) -> None:
        out = gitrefs.try_resolve_commit_id(HTTPS_URL, 'main', CRED, ls_remote=FakeLsRemote(ADVERTISED))
        self.assertIsInstance(out, Success)
        self.assertTrue(out.ok)
        self.assertEqual(out.unwrap(), SHA_MAIN)

    def test_not_found_is_success_none(self) -> None:
        out = gitrefs.try_resolve_commit_id(HTTPS_URL, 'ghost', CRED, ls_remote=FakeLsRemote(ADVERTISED))
        self.assertEqual(out, Success(None))

    def test_failure_carries_kind_and_cause(self) -> None:
        boom = TimeoutError('slow')
        out = gitrefs.try_list_branches_and_tags(HTTPS_URL, CRED, ls_remote=FakeLsRemote(error=boom))
        self.assertIsInstance(out, Failure)
        self.assertFalse(out.ok)
        self.assertIs(out.kind, ErrorKind.REF_LISTING_FAILED)
        self.assertIs(out.cause, boom)
        with self.assertRaises(RefListingFailed) as cm:
            out.unwrap()
        self.assertIs(cm.exception.__cause__, boom)

    def test_invalid_request_outcome(self) -> None:
        out = gitrefs.try_list_branches_and_tags('', CRED)
        self.assertIs(out.kind, ErrorKind.INVALID_REQUEST)
        self.assertIsNone(out.cause)


# --------------------------------------------------------------------------- #
#  Configuration                                                              #
# --------------------------------------------------------------------------- #
class ConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        cfg = ResolverConfig.from_env({})
        self.assertIs(cfg.host_key_policy, HostKeyPolicy.ACCEPT_ALL)
        self.assertIsNone(cfg.known_hosts_file)
        self.assertEqual(cfg.ssh_timeout, 30.0)

    def test_env_values(self) -> None:
        cfg = ResolverConfig.from_env({
            'GITREFS_STRICT_HOST_KEYS': '1',
            'GITREFS_KNOWN_HOSTS': '/etc/ssh/extra_known_hosts',
            'GITREFS_SSH_TIMEOUT': '12.5',
        })
        self.assertIs(cfg.host_key_policy, HostKeyPolicy.KNOWN_HOSTS)
        self.assertEqual(cfg.known_hosts_file, Path('/etc/ssh/extra_known_hosts'))
        self.assertEqual(cfg.ssh_timeout, 12.5)

    def test_zero_timeout_disables(self) -> None:
        self.assertIsNone(ResolverConfig.from_env({'GITREFS_SSH_TIMEOUT': '0'}).ssh_timeout)

    def test_bad_timeout(self) -> None:
        with self.assertRaises(ValueError):
            ResolverConfig.from_env({'GITREFS_SSH_TIMEOUT': 'soon'})

    def test_overrides_win(self) -> None:
        cfg = ResolverConfig.from_env({'GITREFS_STRICT_HOST_KEYS': '1'}, host_key_policy=HostKeyPolicy.ACCEPT_ALL)
        self.assertIs(cfg.host_key_policy, HostKeyPolicy.ACCEPT_ALL)


if __name__ == '__main__':
    unittest.main()
