"""Tests for password hashing and session tokens."""

from app.utils.security import hash_password, verify_password


class TestPasswordHashing:
    def test_roundtrip(self):
        encoded = hash_password("s3cret", iterations=1000)

        assert encoded.startswith("pbkdf2_sha256$1000$")
        assert verify_password("s3cret", encoded) is True
        assert verify_password("other", encoded) is False

    def test_salts_differ(self):
        assert hash_password("same", iterations=1000) != hash_password("same", iterations=1000)

    def test_malformed_hash_is_rejected(self):
        assert verify_password("x", "garbage") is False
        assert verify_password("x", "md5$1$a$b") is False


class TestSessions:
    def test_create_and_resolve(self, session_service):
        token = session_service.create_session(42)

        assert session_service.resolve(token) == 42

    def test_unknown_token_does_not_resolve(self, session_service):
        assert session_service.resolve("not-a-token") is None

    def test_session_expires(self, session_service, fake_redis):
        token = session_service.create_session(42)

        assert 0 < fake_redis.ttl(f"session:{token}") <= session_service.ttl


class TestNotificationTask:
    def test_task_runs_eagerly(self):
        from app.services.notification_service import send_order_notification_task

        result = send_order_notification_task.delay(1, 2, "10.00")

        assert result.get() == {"user_id": 1, "order_id": 2, "total_price": "10.00", "status": "sent"}
