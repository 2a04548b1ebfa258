"""Tests for session identity and session record value objects."""

from datetime import datetime, timedelta, timezone

import pytest

from ehr_connect.core.entities import SessionRecord
from ehr_connect.core.value_objects import SessionIdentity


NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)


class TestSessionIdentity:
    """Test identity key derivation."""

    def test_key_is_deterministic(self):
        assert SessionIdentity("https://api.test", "user1").key == SessionIdentity("https://api.test", "user1").key

    def test_key_distinguishes_principals(self):
        assert SessionIdentity("https://api.test", "user1").key != SessionIdentity("https://api.test", "user2").key

    def test_key_distinguishes_backends(self):
        assert SessionIdentity("https://a.test", "user1").key != SessionIdentity("https://b.test", "user1").key

    def test_key_format(self):
        assert SessionIdentity("https://api.example.com", "user123").key == "https://api.example.com_user123"

    def test_identity_is_hashable_and_equal_by_value(self):
        assert {SessionIdentity("https://api.test", "u1"), SessionIdentity("https://api.test", "u1")} == {
            SessionIdentity("https://api.test", "u1")
        }

    @pytest.mark.parametrize("base_url,principal", [("", "user1"), ("https://api.test", "")])
    def test_empty_parts_rejected(self, base_url, principal):
        with pytest.raises(ValueError):
            SessionIdentity(base_url, principal)

    def test_str_masks_principal(self):
        assert "username1" not in str(SessionIdentity("https://api.test", "username1"))


class TestSessionRecord:
    """Test record expiry arithmetic."""

    def test_issue_sets_expiry_from_ttl(self):
        record = SessionRecord.issue("session_id=abc", NOW, 300)

        assert record.refreshed_at == NOW
        assert record.expires_at == NOW + timedelta(seconds=300)

    def test_usable_strictly_before_expiry(self):
        record = SessionRecord.issue("session_id=abc", NOW, 300)

        assert record.is_usable(NOW + timedelta(seconds=299))
        assert not record.is_usable(NOW + timedelta(seconds=300))
        assert not record.is_usable(NOW + timedelta(seconds=301))

    def test_remaining_seconds_never_negative(self):
        record = SessionRecord.issue("session_id=abc", NOW, 300)

        assert record.remaining_seconds(NOW + timedelta(seconds=100)) == 200
        assert record.remaining_seconds(NOW + timedelta(seconds=900)) == 0

    def test_non_positive_ttl_rejected(self):
        with pytest.raises(ValueError, match="TTL must be positive"):
            SessionRecord.issue("session_id=abc", NOW, 0)

    def test_repr_and_dict_mask_credential(self):
        record = SessionRecord.issue("wcdb_session_id=supersecrettoken", NOW, 300)

        assert "supersecrettoken" not in repr(record)
        assert "supersecrettoken" not in str(record.to_dict())
        assert record.to_dict()["credential"].startswith("wcdb_session_id=")
