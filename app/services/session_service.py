# app/services/session_service.py
import secrets

import redis

from app.utils.retry import redis_retry
from app.utils.settings import REDIS_URL, SESSION_TTL_SECONDS
from app.utils.logging import get_logger

logger = get_logger(__name__)


class SessionService:
    """
    Tokeny sesji (bearer) trzymane w redisie z TTL.
    token -> user_id
    """

    def __init__(self, url: str | None = None, client: redis.Redis | None = None, ttl: int | None = None):
        self.redis = client or redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
        )
        self.ttl = ttl or SESSION_TTL_SECONDS

    @staticmethod
    def _key(token: str) -> str:
        return f"session:{token}"

    @redis_retry()
    def create_session(self, user_id: int) -> str:
        token = secrets.token_urlsafe(32)
        self.redis.set(name=self._key(token), value=str(user_id), ex=self.ttl)
        logger.info(f"Session created for user {user_id}")
        return token

    @redis_retry()
    def resolve(self, token: str) -> int | None:
        value = self.redis.get(self._key(token))
        if value is None:
            return None
        return int(value)
