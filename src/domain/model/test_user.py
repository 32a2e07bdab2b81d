"""Unit tests for User domain model — credential union and public projection.

Tests focus on behavior other layers depend on:
- password_hash / provider derived from the credential variant
- UserProfile never exposing credential material
"""

import unittest
from dataclasses import fields
from datetime import datetime, timezone

from domain.model.user import (
    DEFAULT_ROLE,
    FederatedIdentity,
    LocalCredential,
    User,
    UserProfile,
)


def _make_user(credential, **overrides) -> User:
    now = datetime.now(timezone.utc)
    defaults = dict(
        id='user-1',
        email='a@x.com',
        credential=credential,
        created_at=now,
        updated_at=now,
    )
    defaults.update(overrides)
    return User(**defaults)


class TestCredential(unittest.TestCase):
    """Tests for the LocalCredential / FederatedIdentity union."""

    def test_local_user_exposes_password_hash(self):
        user = _make_user(LocalCredential(password_hash='$2b$10$abc'))

        self.assertEqual(user.password_hash, '$2b$10$abc')
        self.assertEqual(user.provider, 'email')

    def test_federated_user_has_no_password_hash(self):
        user = _make_user(FederatedIdentity(provider_ref='google-123'))

        self.assertIsNone(user.password_hash)
        self.assertEqual(user.provider, 'federated')

    def test_local_credential_repr_hides_hash(self):
        """The hash must not leak into logs through repr()."""
        credential = LocalCredential(password_hash='$2b$10$abc')

        self.assertNotIn('$2b$10$abc', repr(credential))

    def test_defaults(self):
        user = _make_user(LocalCredential(password_hash='h'))

        self.assertEqual(user.role, DEFAULT_ROLE)
        self.assertTrue(user.is_active)
        self.assertIsNone(user.name)


class TestUserProfile(unittest.TestCase):
    """Tests for the credential-free projection."""

    def test_profile_has_no_credential_fields(self):
        field_names = {f.name for f in fields(UserProfile)}

        self.assertEqual(field_names, {'id', 'email', 'name', 'role'})

    def test_to_profile_copies_identity(self):
        user = _make_user(LocalCredential(password_hash='h'), name='Ann', role='admin')

        profile = user.to_profile()

        self.assertEqual(profile, UserProfile(id='user-1', email='a@x.com', name='Ann', role='admin'))


if __name__ == '__main__':
    unittest.main()
