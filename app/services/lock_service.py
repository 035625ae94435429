import uuid
from contextlib import contextmanager

import redis

from app.domain.exceptions import ConflictError
from app.utils.retry import redis_retry
from app.utils.settings import REDIS_URL, CART_LOCK_TTL_SECONDS
from app.utils.logging import get_logger

logger = get_logger(__name__)

#LUA porownaj i usun, atomicity
_RELEASE_LUA = """
if redis.call('GET', KEYS[1]) == ARGV[1] then
    return redis.call('DEL', KEYS[1])
else
    return 0
end
"""

#redis wykonuje atomowo przez lua, skrypt dziala jako jedna nieprzerywalna operacja
#nie mozna wcisnac sie miedzy GET a DEL, wiec tu jest get + porownanie + del wszystko naraz


class LockService:
    """
    -blokada koszyka uzytkownika (jedna mutacja / zakup na raz)
    -zwalnianie locka tylko przez wlasciciela tokenu
    -atomowosc przy pomocy lua
    """

    def __init__(self, url: str | None = None, client: redis.Redis | None = None):
        self.redis = client or redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
        )

    @staticmethod
    def _cart_key(user_id: int) -> str:
        return f"cart:user:{user_id}:lock"

    @redis_retry()
    def acquire_cart_lock(self, user_id: int, token: str, ttl: int) -> bool:
        key = self._cart_key(user_id)
        logger.debug(f"Acquire lock {key}")
        #SET cart:user:1:lock "<token>" NX EX 10
        return bool(self.redis.set(name=key, value=token, nx=True, ex=ttl))

    @redis_retry()
    def release_cart_lock(self, user_id: int, token: str) -> bool:
        key = self._cart_key(user_id)
        logger.debug(f"Release lock {key}")
        res = self.redis.eval(_RELEASE_LUA, 1, key, token)
        return bool(res)

    @contextmanager
    def cart_lock(self, user_id: int, ttl: int | None = None):
        token = uuid.uuid4().hex
        if not self.acquire_cart_lock(user_id, token, ttl or CART_LOCK_TTL_SECONDS):
            logger.warning(f"Cart of user {user_id} is locked by another request")
            raise ConflictError(
                "Cart is being modified by another request",
                details={"user_id": user_id},
            )
        try:
            yield
        finally:
            self.release_cart_lock(user_id, token)
