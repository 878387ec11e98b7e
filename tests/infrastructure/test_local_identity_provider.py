"""Tests for the local identity provider."""

from __future__ import annotations

import pytest

from medistore.domain.exceptions import ValidationError
from medistore.domain.model.user import User
from medistore.infrastructure.identity.local_identity_provider import LocalIdentityProvider


class TestLocalIdentityProvider:

    def test_starts_anonymous(self):
        assert LocalIdentityProvider().current_user() is None

    def test_sign_in_notifies_listeners(self):
        provider = LocalIdentityProvider()
        seen = []
        provider.subscribe(seen.append)

        provider.sign_in("alice", "alice@example.com")
        provider.sign_out()

        assert seen == [User("alice", "alice@example.com"), None]

    def test_same_user_does_not_renotify(self):
        provider = LocalIdentityProvider()
        seen = []
        provider.subscribe(seen.append)
        provider.sign_in("alice")
        provider.sign_in("alice")
        assert seen == [User("alice")]

    def test_unsubscribe(self):
        provider = LocalIdentityProvider()
        seen = []
        unsubscribe = provider.subscribe(seen.append)
        unsubscribe()
        provider.sign_in("alice")
        assert seen == []

    def test_blank_uid_rejected(self):
        with pytest.raises(ValidationError, match="User id is required"):
            LocalIdentityProvider().sign_in("  ")

    def test_session_file_persists_between_instances(self, tmp_path):
        path = tmp_path / "session.json"
        LocalIdentityProvider(path).sign_in("alice", "a@example.com")
        assert LocalIdentityProvider(path).current_user() == User("alice", "a@example.com")

        LocalIdentityProvider(path).sign_out()
        assert LocalIdentityProvider(path).current_user() is None

    @pytest.mark.parametrize("content", ["{not json", '{"email": "a@example.com"}', "[1, 2]", '"alice"'])
    def test_unreadable_session_file_starts_anonymous(self, tmp_path, content):
        path = tmp_path / "session.json"
        path.write_text(content, encoding="utf-8")

        provider = LocalIdentityProvider(path)

        assert provider.current_user() is None
        provider.sign_in("alice")
        assert LocalIdentityProvider(path).current_user() == User("alice")
